# src/stericoverlap/infrastructure/readers/pdb_atom_reader.py
"""Reader turning ATOM/HETATM records of a PDB file into a PointSet."""

import logging
import os
from decimal import InvalidOperation
from typing import Iterable, Optional

from ...core.domain.models.coordinate import Coordinate
from ...core.domain.models.point import Point
from ...core.domain.models.point_set import PointSet
from ...core.exceptions import PDBFormatError, PointSetReadError

logger = logging.getLogger(__name__)

ATOM_RECORDS = ("ATOM", "HETATM")


class PDBAtomReader:
    """Parses the fixed-column atom records of PDB files."""

    def read(self, file_path: str) -> PointSet:
        """
        Read every ATOM and HETATM record of a PDB file.

        Args:
            file_path: Path of the PDB file

        Returns:
            PointSet labelled with the file path, atoms in file order

        Raises:
            PointSetReadError: If the file cannot be opened
            PDBFormatError: If an atom record is malformed
        """
        if not os.path.isfile(file_path):
            raise PointSetReadError(f"Could not open file {file_path}")
        try:
            # Atom records are ASCII; latin-1 decodes any stray byte elsewhere.
            with open(file_path, "r", encoding="latin-1") as f:
                points = self.parse_lines(f, label=file_path)
        except OSError as e:
            raise PointSetReadError(f"Could not open file {file_path}: {e}") from e

        logger.debug(f"Read {len(points)} atoms from {file_path}")
        return points

    def parse_lines(self, lines: Iterable[str], label: str = "") -> PointSet:
        """Parse atom records from an iterable of lines."""
        points = PointSet(label=label)
        for line_number, line in enumerate(lines, start=1):
            fields = line.split()
            if not fields or fields[0] not in ATOM_RECORDS:
                continue
            points.append(self.parse_atom_line(line, label, line_number))
        return points

    @staticmethod
    def parse_atom_line(
        line: str, label: str = "", line_number: Optional[int] = None
    ) -> Point:
        """Parse one ATOM/HETATM record line."""
        line = line.rstrip("\r\n")
        if len(line) < 54:
            raise PDBFormatError(label, line_number or 0, "atom record shorter than 54 columns")
        try:
            return Point(
                serial=int(line[6:12].strip()),
                atom_name=line[12:16].strip(),
                alt_loc=line[16:17].strip(),
                residue_name=line[17:21].strip(),
                chain_id=line[21:22].strip(),
                residue_seq=int(line[22:26].strip()),
                insertion_code=line[26:27].strip(),
                centre=Coordinate.from_strings(
                    (line[30:38], line[38:46], line[46:54])
                ),
            )
        except (ValueError, InvalidOperation) as e:
            raise PDBFormatError(label, line_number or 0, f"malformed atom record: {e}") from e
