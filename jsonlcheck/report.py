from jsonlcheck.schemas import Tally


def render_summary(tally: Tally) -> list[str]:
    lines: list[str] = []
    if tally.missing_record_id > 0:
        lines.append(f"{tally.missing_record_id} line(s) had no RECORD_ID field.")
    if tally.missing_data_source > 0:
        lines.append(f"{tally.missing_data_source} line(s) had no DATA_SOURCE field.")
    if tally.malformed > 0:
        lines.append(f"{tally.malformed} line(s) are not well formed JSON-lines.")
    if tally.other_invalid > 0:
        lines.append(f"{tally.other_invalid} line(s) did not validate for an unknown reason.")
    lines.append(f"Validated {tally.total_lines} lines, {tally.bad_count} were bad.")
    return lines
