"""
Skill equivalence for comparing resume skills with job skills.

Two skill strings match when, after trimming and lowercasing, they are equal,
one contains the other, or one is a listed variant of the other. The relation
is symmetric but not transitive: "js" matches "javascript" and "javascript"
matches "java", yet "js" does not match "java".
"""

from types import MappingProxyType

# Main spelling -> accepted variants (all lowercase)
SKILL_SYNONYMS = MappingProxyType(
    {
        "javascript": ("js", "ecmascript"),
        "typescript": ("ts",),
        "react": ("reactjs", "react.js"),
        "vue": ("vuejs", "vue.js"),
        "node.js": ("nodejs", "node"),
    }
)


def normalize_skill(skill: str) -> str:
    return skill.strip().lower()


def is_skill_match(skill_a: str, skill_b: str) -> bool:
    """
    Decide whether two skill names refer to the same skill.

    Args:
        skill_a: First skill name, any casing
        skill_b: Second skill name, any casing

    Returns:
        True on equality, substring containment in either direction, or a
        synonym-table hit
    """
    a = normalize_skill(skill_a)
    b = normalize_skill(skill_b)

    if a == b:
        return True
    if a in b or b in a:
        return True

    for main, variants in SKILL_SYNONYMS.items():
        if (a == main and b in variants) or (b == main and a in variants):
            return True

    return False


def has_match(skill: str, candidates) -> bool:
    """True if any skill in candidates matches skill."""
    return any(is_skill_match(skill, other) for other in candidates)
