"""
Cleans the decoded export text before it reaches the XML parser.

The hospital system writes some tag names with a '$' in them
(e.g. <CS_TOTAL$>), which no XML parser accepts.
"""
import re

BOM = '\ufeff'

# CDATA sections and comments are matched first and copied unchanged;
# otherwise '<' or '</' followed by a tag name that contains at least one '$'.
_DOLLAR_TAG = re.compile(
    r"(<!\[CDATA\[.*?\]\]>|<!--.*?-->)|<(/?)(\w[\w$]*\$[\w$]*)",
    re.DOTALL,
)


def _strip_dollar(match: re.Match) -> str:
    if match.group(1):
        return match.group(1)
    return f"<{match.group(2)}{match.group(3).replace('$', '')}"


def sanitize_xml(text: str) -> str:
    """
    Removes a leading byte-order mark and the '$' characters from tag names.

    Opening and closing tags are handled the same way. Text, attribute values,
    CDATA sections and comments are not touched.
    """
    if text.startswith(BOM):
        text = text[1:]
    return _DOLLAR_TAG.sub(_strip_dollar, text)
