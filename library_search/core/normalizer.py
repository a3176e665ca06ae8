# library_search/core/normalizer.py
# One case-mapping rule shared by the tries and the substring search.
# str.lower() is the Unicode default lowercase mapping and never looks at the
# process locale, so trie paths are the same on every machine.


def normalize_key(s: str) -> str:
    if not s:
        return ""
    return s.lower()


def normalize_query(s: str) -> str:
    """Lowercase + trim, used for submitted search queries."""
    return normalize_key(s).strip()
