"""
Utility functions for JSON Schema to Swift generator.
"""

from pathlib import PurePosixPath


def capitalize(text: str) -> str:
    """Uppercase the first character when it is an ASCII lowercase letter.

    The rest of the text is left untouched, so "userProfile" becomes
    "UserProfile" and "éclair" stays "éclair".

    Examples:
        "user" -> "User"
        "user_profile" -> "User_profile"
        "" -> ""
    """
    if not text:
        return ""
    first = text[0]
    if "a" <= first <= "z":
        first = first.upper()
    return first + text[1:]


def ref_base_name(ref_path: str) -> str:
    """Base name of a $ref path with its extension stripped.

    Examples:
        "./address.json" -> "address"
        "models/user.json" -> "user"
        "#/definitions/Point" -> "Point"
    """
    return PurePosixPath(ref_path).stem


def model_name_for(name: str, namespace: str = "") -> str:
    """Namespace-prefixed, capitalized model name."""
    return namespace + capitalize(name)
