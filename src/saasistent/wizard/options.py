"""
Choice catalogs for the project wizard.

Every single-choice field of a project configuration is an enumeration;
each member has a catalog entry with a display name and a short description
used by the interactive front-ends and the review summary.
"""

from dataclasses import dataclass
from enum import Enum


class ComponentLibrary(str, Enum):
    SHADCN = "shadcn"
    CHAKRA = "chakra"
    MANTINE = "mantine"
    RADIX = "radix"


class ApplicationPattern(str, Enum):
    DASHBOARD = "dashboard"
    LANDING = "landing"
    MARKETPLACE = "marketplace"
    SOCIAL = "social"
    CONTENT = "content"
    GAMIFIED = "gamified"


class DesignStyle(str, Enum):
    MINIMAL = "minimal"
    MODERN = "modern"
    CORPORATE = "corporate"
    PLAYFUL = "playful"
    DARK = "dark"
    GLASSMORPHISM = "glassmorphism"


class Framework(str, Enum):
    NEXTJS = "nextjs"
    REMIX = "remix"
    NUXT = "nuxt"
    SVELTEKIT = "sveltekit"


class Database(str, Enum):
    SUPABASE = "supabase"
    PLANETSCALE = "planetscale"
    MONGODB = "mongodb"
    FIREBASE = "firebase"


class AuthProvider(str, Enum):
    SUPABASE = "supabase"
    CLERK = "clerk"
    NEXTAUTH = "nextauth"
    AUTH0 = "auth0"


class StorageProvider(str, Enum):
    SUPABASE = "supabase"
    CLOUDFLARE = "cloudflare"
    AWS = "aws"
    UPLOADTHING = "uploadthing"


class AIProvider(str, Enum):
    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    COHERE = "cohere"
    NONE = "none"


class AIFeature(str, Enum):
    CHAT = "chat"
    SEARCH = "search"
    SUMMARIZATION = "summarization"
    GENERATION = "generation"
    CLASSIFICATION = "classification"
    EMBEDDINGS = "embeddings"


@dataclass(frozen=True)
class Option:
    """Catalog entry for one enumerated choice."""

    value: Enum
    name: str
    description: str = ""


COMPONENT_LIBRARIES = (
    Option(ComponentLibrary.SHADCN, "shadcn/ui", "Accessible components built with Radix UI and Tailwind CSS"),
    Option(ComponentLibrary.CHAKRA, "Chakra UI", "Simple, modular and accessible component library"),
    Option(ComponentLibrary.MANTINE, "Mantine", "A fully featured React components library with hooks"),
    Option(ComponentLibrary.RADIX, "Radix Primitives", "Unstyled, accessible components for design systems"),
)

APPLICATION_PATTERNS = (
    Option(ApplicationPattern.DASHBOARD, "Dashboard App", "Admin dashboard with data visualization and tables"),
    Option(ApplicationPattern.LANDING, "Landing + App", "Marketing landing page with a protected application area"),
    Option(ApplicationPattern.MARKETPLACE, "Marketplace", "Multi-vendor marketplace with listings, search and transactions"),
    Option(ApplicationPattern.SOCIAL, "Social Platform", "User profiles, feeds, connections and real-time interactions"),
    Option(ApplicationPattern.CONTENT, "Content Platform", "Blog, CMS or documentation site with rich content editing"),
    Option(ApplicationPattern.GAMIFIED, "Gamified App", "Points, badges, leaderboards and engagement mechanics"),
)

DESIGN_STYLES = (
    Option(DesignStyle.MINIMAL, "Minimal", "Clean, spacious layouts with subtle colors"),
    Option(DesignStyle.MODERN, "Modern", "Bold typography, vibrant gradients, shadows"),
    Option(DesignStyle.CORPORATE, "Corporate", "Professional, trustworthy, enterprise-ready"),
    Option(DesignStyle.PLAYFUL, "Playful", "Rounded corners, bright colors, friendly feel"),
    Option(DesignStyle.DARK, "Dark Mode First", "Optimized for dark interfaces with accent colors"),
    Option(DesignStyle.GLASSMORPHISM, "Glassmorphism", "Frosted glass effects, transparency, blur"),
)

FRAMEWORKS = (
    Option(Framework.NEXTJS, "Next.js", "React framework with App Router and server components"),
    Option(Framework.REMIX, "Remix", "Full stack web framework focused on web standards"),
    Option(Framework.NUXT, "Nuxt", "Vue.js meta-framework with server-side rendering"),
    Option(Framework.SVELTEKIT, "SvelteKit", "Svelte app framework with fast performance and simple syntax"),
)

DATABASES = (
    Option(Database.SUPABASE, "Supabase (PostgreSQL)", "Open source Firebase alternative"),
    Option(Database.PLANETSCALE, "PlanetScale (MySQL)", "Serverless MySQL platform"),
    Option(Database.MONGODB, "MongoDB Atlas", "Cloud document database"),
    Option(Database.FIREBASE, "Firebase", "Google's real-time database"),
)

AUTH_PROVIDERS = (
    Option(AuthProvider.SUPABASE, "Supabase Auth", "Built-in auth with row-level security"),
    Option(AuthProvider.CLERK, "Clerk", "Complete user management"),
    Option(AuthProvider.NEXTAUTH, "NextAuth.js", "Flexible authentication for Next.js"),
    Option(AuthProvider.AUTH0, "Auth0", "Enterprise identity platform"),
)

STORAGE_PROVIDERS = (
    Option(StorageProvider.SUPABASE, "Supabase Storage", "S3-compatible object storage"),
    Option(StorageProvider.CLOUDFLARE, "Cloudflare R2", "Zero egress fees object storage"),
    Option(StorageProvider.AWS, "AWS S3", "Industry standard object storage"),
    Option(StorageProvider.UPLOADTHING, "UploadThing", "File uploads made easy"),
)

AI_PROVIDERS = (
    Option(AIProvider.ANTHROPIC, "Anthropic Claude", "Advanced reasoning and analysis"),
    Option(AIProvider.OPENAI, "OpenAI GPT", "Versatile language model"),
    Option(AIProvider.COHERE, "Cohere", "Enterprise NLP platform"),
    Option(AIProvider.NONE, "No AI", "Skip AI integration"),
)

AI_FEATURES = (
    Option(AIFeature.CHAT, "Chat Interface", "Conversational AI assistant"),
    Option(AIFeature.SEARCH, "Semantic Search", "AI-powered content search"),
    Option(AIFeature.SUMMARIZATION, "Summarization", "Auto-summarize content"),
    Option(AIFeature.GENERATION, "Content Generation", "Generate text, emails, etc."),
    Option(AIFeature.CLASSIFICATION, "Classification", "Categorize and tag content"),
    Option(AIFeature.EMBEDDINGS, "Embeddings", "Vector representations for similarity"),
)

# Configuration field -> catalog
CATALOGS: dict[str, tuple[Option, ...]] = {
    "component_library": COMPONENT_LIBRARIES,
    "application_pattern": APPLICATION_PATTERNS,
    "design_style": DESIGN_STYLES,
    "framework": FRAMEWORKS,
    "database": DATABASES,
    "auth": AUTH_PROVIDERS,
    "storage": STORAGE_PROVIDERS,
    "ai_provider": AI_PROVIDERS,
    "ai_features": AI_FEATURES,
}


def get_option(field_name: str, value: Enum | str) -> Option:
    """
    Look up the catalog entry for a field value.

    Raises:
        KeyError: If the field has no catalog or the value is not in it.
    """
    raw = value.value if isinstance(value, Enum) else value
    for option in CATALOGS[field_name]:
        if option.value.value == raw:
            return option
    raise KeyError(f"{raw!r} is not a valid choice for {field_name}")


def display_name(field_name: str, value: Enum | str) -> str:
    """Display name for a field value, falling back to the raw value."""
    try:
        return get_option(field_name, value).name
    except KeyError:
        return value.value if isinstance(value, Enum) else str(value)
