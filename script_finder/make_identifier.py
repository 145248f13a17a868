"""Escaping of script path segments into class-name identifiers."""

import keyword

# Precompiled bundles are named with the JVM escaping scheme, so its reserved
# words are escaped alongside Python's.
JAVA_KEYWORDS = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "false",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "true",
        "try",
        "void",
        "volatile",
        "while",
    }
)


def make_identifier(segment: str) -> str:
    """Turn a path segment into a valid identifier.

    Dots become underscores, other illegal characters (underscore included)
    become ``_`` followed by four hex digits. ``$`` is kept, as in JVM class
    names.
    """
    if not segment:
        return "_"
    out = []
    if not _is_identifier_start(segment[0]):
        out.append("_")
    for ch in segment:
        if ch != "_" and _is_identifier_part(ch):
            out.append(ch)
        elif ch == ".":
            out.append("_")
        else:
            out.append(mangle_char(ch))
    identifier = "".join(out)
    if is_reserved_word(identifier):
        identifier += "_"
    return identifier


def mangle_char(ch: str) -> str:
    """Encode a single character as ``_`` plus four lowercase hex digits."""
    return f"_{ord(ch):04x}"


def is_reserved_word(word: str) -> bool:
    """Check whether ``word`` is reserved in either naming scheme."""
    return word in JAVA_KEYWORDS or keyword.iskeyword(word)


def _is_identifier_start(ch: str) -> bool:
    return ch == "$" or ch.isidentifier()


def _is_identifier_part(ch: str) -> bool:
    return ch == "$" or f"a{ch}".isidentifier()
