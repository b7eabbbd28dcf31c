"""Line-level weight of a source file.

Weight is the number of lines that are neither blank nor a line comment.
Block comments and trailing comments are not recognised; a line like
``int x = 1; // note`` counts, as does every line inside ``/* ... */``.
"""

from ..logging_config import get_logger
from .models import SourceFile

logger = get_logger(__name__)

COMMENT_MARKER = "//"
EDITOR_MARKER = "using UnityEditor;"


def counts_toward_weight(line: str, comment_marker: str = COMMENT_MARKER) -> bool:
    """Return True if the line is neither blank nor a line comment."""
    if not line.strip():
        return False
    return not line.lstrip().startswith(comment_marker)


def score_file(
    file: SourceFile,
    editor_marker: str = EDITOR_MARKER,
    comment_marker: str = COMMENT_MARKER,
) -> tuple[int, bool]:
    """
    Compute a file's weight and whether it belongs to the editor layer.

    Content is split on "\\n" only, so a carriage return left at the end of a
    line is stripped as whitespace. The editor check is a plain substring
    search over the whole file, not an import analysis.

    Args:
        file: File to score
        editor_marker: Substring marking editor/tool-layer files
        comment_marker: Line comment prefix

    Returns:
        (weight, is_editor_file)
    """
    content = file.content
    if content is None:
        logger.debug(f"{file.name} has no content, scoring as empty")
        return 0, False

    weight = sum(1 for line in content.split("\n") if counts_toward_weight(line, comment_marker))
    return weight, editor_marker in content
