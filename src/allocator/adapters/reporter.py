from typing import Iterable, List, Mapping, TextIO

from allocator.domain.model import AllocationReport

HEADER_DELIMITER = ":"
GROUP_DELIMITER = "::"
VALUE_DELIMITER = ","


def _join(quantities: Mapping[str, int], delimiter: str) -> str:
    return delimiter.join(str(qty) for qty in quantities.values())


def render_report(
    report: AllocationReport,
    header_delimiter: str = HEADER_DELIMITER,
    group_delimiter: str = GROUP_DELIMITER,
    value_delimiter: str = VALUE_DELIMITER,
) -> str:
    groups = (report.demand, report.allocation, report.backorder)
    body = group_delimiter.join(_join(group, value_delimiter) for group in groups)
    return f"{report.header}{header_delimiter}{body}"


def render_reports(reports: Iterable[AllocationReport], **delimiters: str) -> List[str]:
    return [render_report(report, **delimiters) for report in reports]


def write_reports(reports: Iterable[AllocationReport], stream: TextIO, **delimiters: str) -> int:
    """Write one rendered line per report and return how many were written."""
    written = 0
    for line in render_reports(reports, **delimiters):
        stream.write(f"{line}\n")
        written += 1
    return written
