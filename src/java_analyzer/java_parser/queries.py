"""
Tree-sitter query patterns for Java analysis.

These patterns locate the package declaration and the top-level type
declarations of a compilation unit; members are read directly from the
declaration bodies.
"""

# ============================================================================
# Common Query Patterns for Java Parsing
# ============================================================================

QUERY_PATTERNS = {
    # Match the package declaration
    "PACKAGE": """
        (package_declaration
            [(identifier) (scoped_identifier)] @package_name) @package
    """,

    # Match top-level class and enum declarations (direct children of the root)
    "TYPE": """
        (program
            [
                (class_declaration name: (identifier) @type_name)
                (enum_declaration name: (identifier) @type_name)
            ] @type)
    """,
}

