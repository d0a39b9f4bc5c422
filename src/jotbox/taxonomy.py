"""
Keyword taxonomy for Jotbox.

The fixed set of categories and the keywords that signal them. This is data,
not logic: tune keywords here without touching the scoring code in
jotbox.classifier.

CATEGORY CONSTRAINT: Seven categories plus General, closed. Keyword order
within a category does not matter; category order does (first best score wins).
"""

from types import MappingProxyType

# Fallback when no keyword of any category matches
GENERAL = "General"

# Caller-supplied category meaning "let the classifier decide"
AUTO = "Auto"

CATEGORIES: MappingProxyType = MappingProxyType({
    "Educational": (
        "study", "exam", "course", "lecture", "homework", "university", "college",
        "school", "research", "learn", "learning", "student", "teacher", "professor",
        "assignment", "thesis", "dissertation", "tutorial", "education", "class",
        "semester", "grade", "textbook", "curriculum", "syllabus", "academic",
        "scholarship", "diploma", "degree", "knowledge", "training", "workshop",
        "quiz", "test", "chapter", "notes", "reading", "essay", "paper",
    ),
    "Business": (
        "meeting", "client", "revenue", "project", "deadline", "strategy",
        "invoice", "budget", "stakeholder", "presentation", "proposal", "contract",
        "negotiation", "partnership", "marketing", "sales", "profit", "loss",
        "startup", "entrepreneur", "customer", "vendor", "supplier", "logistics",
        "operations", "management", "leadership", "team", "corporate", "office",
        "quarterly", "kpi", "roi", "target", "pipeline", "deal", "agenda",
        "milestone", "deliverable", "report", "analytics", "forecast",
    ),
    "Personal": (
        "family", "birthday", "vacation", "hobby", "diary", "goal", "friend",
        "relationship", "wedding", "anniversary", "party", "weekend", "home",
        "garden", "cooking", "recipe", "pet", "dog", "cat", "kids", "children",
        "parent", "mom", "dad", "shopping", "gift", "memory", "dream", "wish",
        "journal", "gratitude", "love", "emotion", "feeling", "personal",
        "self-care", "mindfulness", "meditation", "reflection",
    ),
    "Technology": (
        "code", "programming", "software", "api", "server", "database", "bug",
        "deploy", "frontend", "backend", "algorithm", "javascript", "python",
        "react", "node", "html", "css", "git", "github", "docker", "cloud",
        "aws", "azure", "linux", "windows", "app", "application", "framework",
        "library", "component", "function", "variable", "debug", "compile",
        "ai", "machine learning", "data science", "cybersecurity", "devops",
        "microservice", "architecture", "terminal", "command", "script",
        "automation", "testing", "ci/cd", "agile", "scrum", "tech", "computer",
    ),
    "Finance": (
        "investment", "savings", "bank", "tax", "salary", "expense", "loan",
        "stock", "mutual fund", "portfolio", "dividend", "interest", "mortgage",
        "insurance", "retirement", "pension", "credit", "debit", "payment",
        "transaction", "accounting", "audit", "balance", "income", "wealth",
        "crypto", "bitcoin", "trading", "forex", "bond", "equity", "asset",
        "liability", "inflation", "emi", "finance", "financial", "money",
    ),
    "Health": (
        "exercise", "diet", "workout", "doctor", "medicine", "sleep", "nutrition",
        "gym", "yoga", "running", "fitness", "weight", "calories", "protein",
        "vitamin", "supplement", "hospital", "clinic", "therapy", "mental health",
        "anxiety", "depression", "wellness", "hydration", "water", "walk",
        "stretching", "cardio", "strength", "recovery", "injury", "prescription",
        "checkup", "blood pressure", "heart", "health", "healthy", "disease",
    ),
    "Travel": (
        "flight", "hotel", "trip", "destination", "passport", "itinerary",
        "booking", "tour", "airport", "luggage", "sightseeing", "beach",
        "mountain", "camping", "hiking", "road trip", "cruise", "resort",
        "backpacking", "visa", "ticket", "train", "bus", "adventure", "explore",
        "travel", "journey", "abroad", "international", "domestic", "tourism",
        "landmark", "museum", "culture", "restaurant", "street food",
    ),
})

# Every label a note can carry, taxonomy order then the fallback
ALL_CATEGORIES: tuple[str, ...] = (*CATEGORIES.keys(), GENERAL)


def category_names() -> list[str]:
    """Categories a caller may choose from, in taxonomy order."""
    return list(ALL_CATEGORIES)


def is_known_category(name: str) -> bool:
    """Check whether a label belongs to the closed category set."""
    return name in ALL_CATEGORIES


def is_auto(choice: str | None) -> bool:
    """True when a category choice asks for automatic categorization."""
    return not choice or not choice.strip() or choice.strip().lower() == AUTO.lower()
