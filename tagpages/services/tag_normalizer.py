from slugify import slugify

# Characters kept besides letters, digits and "-"; all are safe in a URL path segment.
_DISALLOWED = r"[^-a-z0-9+._~]+"


def normalize_tag(label: str) -> str:
    """
    Turn a free-text tag label into its URL slug.

    Unicode is transliterated to ASCII and lowercased; whitespace and other
    punctuation collapse into single hyphens, so labels that differ only in
    case or spacing share one slug ("Design Systems", "design  systems" ->
    "design-systems"). "+" and "." survive, keeping "C++" apart from "C".
    Leading or trailing dots are dropped so a slug is never "." or "..".
    Blank input gives "".
    """
    return slugify(label, lowercase=True, regex_pattern=_DISALLOWED).strip(".-")


def format_tag_title(slug: str) -> str:
    """Page heading for a tag slug ("design-systems" -> "Design Systems")."""
    return " ".join(word.capitalize() for word in slug.split("-") if word)
