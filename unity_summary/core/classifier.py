"""Classification of Unity outcome lines."""

from typing import Iterable, List, Optional, Tuple

from ..models.outcome import ClassifiedLine, Malformed, Outcome, OutcomeStatus

FIELD_SEPARATOR = ":"
_STATUSES = {status.value: status for status in OutcomeStatus}


def format_display_line(line: str, root: Optional[str] = None) -> str:
    """Prefix `line` with `root` (when set) and switch every `/` to `\\`."""
    if root:
        line = f"{root}{line}"
    return line.replace("/", "\\")


def classify_line(
    line: str,
    root: Optional[str] = None,
    result_file: Optional[str] = None,
    line_number: Optional[int] = None,
) -> ClassifiedLine:
    """
    Classify one raw line of a result file.

    Args:
        line: Raw line without its terminator
        root: Optional prefix for the display form
        result_file: Result file the line came from
        line_number: 1-based position of the line in that file

    Returns:
        Outcome for `file:line:test:STATUS[:message]` lines, Malformed otherwise
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) < 4:
        return Malformed(line=line, reason=f"expected at least 4 fields, got {len(fields)}")

    status = _STATUSES.get(fields[3])
    if status is None:
        return Malformed(line=line, reason=f"unknown status {fields[3]!r}")

    return Outcome(
        source_file=fields[0],
        source_line=fields[1],
        test_name=fields[2],
        status=status,
        message=FIELD_SEPARATOR.join(fields[4:]),
        display=format_display_line(line, root),
        result_file=result_file,
        line_number=line_number,
    )


def split_outcomes(
    lines: Iterable[str],
    root: Optional[str] = None,
    result_file: Optional[str] = None,
) -> Tuple[List[str], List[str], List[str], int]:
    """
    Sort the outcome lines of one file by status.

    Returns:
        (successes, failures, ignores, malformed_count), each list holding
        display lines in file order
    """
    successes: List[str] = []
    failures: List[str] = []
    ignores: List[str] = []
    malformed = 0

    for number, line in enumerate(lines, 1):
        classified = classify_line(line, root=root, result_file=result_file, line_number=number)
        if isinstance(classified, Malformed):
            malformed += 1
        elif classified.status is OutcomeStatus.PASS:
            successes.append(classified.display)
        elif classified.status is OutcomeStatus.FAIL:
            failures.append(classified.display)
        elif classified.status is OutcomeStatus.IGNORE:
            ignores.append(classified.display)
        else:
            raise AssertionError(f"Unhandled outcome status: {classified.status}")

    return successes, failures, ignores, malformed
