# src/stericoverlap/infrastructure/writers/clash_report_writer.py
"""Writer for the plain text clash report."""

from typing import Iterable, List, TextIO

from ...core.domain.models.match_record import MatchRecord

SUMMARY_LINE = "Number of clashing atoms: {count}"


class ClashReportWriter:
    """Formats clashing atoms one per line, followed by their count."""

    @staticmethod
    def format_match(record: MatchRecord) -> str:
        atom = record.point
        return "%d %s %4d  %-3s" % (
            atom.serial,
            atom.residue_name,
            atom.residue_seq,
            atom.atom_name,
        )

    def format_lines(self, matches: Iterable[MatchRecord]) -> List[str]:
        lines = [self.format_match(record) for record in matches]
        lines.append(SUMMARY_LINE.format(count=len(lines)))
        return lines

    def render(self, matches: Iterable[MatchRecord]) -> str:
        return "".join(line + "\n" for line in self.format_lines(matches))

    def write(self, matches: Iterable[MatchRecord], fhandle: TextIO) -> None:
        fhandle.write(self.render(matches))

    def save(self, matches: Iterable[MatchRecord], file_path: str) -> None:
        with open(file_path, "w") as f:
            self.write(matches, f)
