"""Shared fixtures for the steric overlap tests."""

import os
import sys
from typing import Iterable, Optional, Sequence

import pytest

SRC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from stericoverlap.core.domain.models.coordinate import Coordinate  # noqa: E402
from stericoverlap.core.domain.models.point import Point  # noqa: E402
from stericoverlap.core.domain.models.point_set import PointSet  # noqa: E402


def make_point(
    serial: int,
    xyz: Sequence,
    atom_name: str = "CA",
    residue_name: str = "ALA",
    residue_seq: int = 1,
    chain_id: str = "A",
) -> Point:
    """Create a point from numbers or strings, keeping their written precision."""
    return Point(
        serial=serial,
        centre=Coordinate.from_strings(str(v) for v in xyz),
        atom_name=atom_name,
        residue_name=residue_name,
        chain_id=chain_id,
        residue_seq=residue_seq,
    )


def make_point_set(coords: Iterable[Sequence], start_serial: int = 1, label: str = "") -> PointSet:
    return PointSet(
        [make_point(start_serial + i, xyz) for i, xyz in enumerate(coords)], label=label
    )


def pdb_atom_line(
    serial: int,
    xyz: Sequence[float],
    atom_name: str = "CA",
    residue_name: str = "ALA",
    chain_id: str = "A",
    residue_seq: int = 1,
    record: str = "ATOM",
    alt_loc: str = "",
    insertion_code: str = "",
) -> str:
    """Format an ATOM/HETATM record with standard PDB columns."""
    return "%-6s%5d %-4s%1s%-3s %1s%4d%1s   %8.3f%8.3f%8.3f  1.00  0.00           C" % (
        record,
        serial,
        atom_name,
        alt_loc,
        residue_name,
        chain_id,
        residue_seq,
        insertion_code,
        xyz[0],
        xyz[1],
        xyz[2],
    )


def write_pdb(path, lines: Iterable[str], header: Optional[str] = "REMARK   test structure") -> str:
    with open(path, "w") as f:
        if header:
            f.write(header + "\n")
        for line in lines:
            f.write(line + "\n")
        f.write("END\n")
    return str(path)


@pytest.fixture
def receptor_pdb(tmp_path):
    """Small receptor: three atoms on the x axis, 3 Angstrom apart."""
    return write_pdb(
        tmp_path / "receptor.pdb",
        [
            pdb_atom_line(1, (0.0, 0.0, 0.0), "N", "GLY", residue_seq=1),
            pdb_atom_line(2, (3.0, 0.0, 0.0), "CA", "GLY", residue_seq=1),
            pdb_atom_line(3, (6.0, 0.0, 0.0), "C", "GLY", residue_seq=1),
            "TER       4      GLY A   1",
        ],
    )


@pytest.fixture
def ligand_pdb(tmp_path):
    """Ligand with two atoms near the receptor and one far away."""
    return write_pdb(
        tmp_path / "ligand.pdb",
        [
            pdb_atom_line(12, (1.5, 1.0, 0.0), "C1", "LIG", "B", 101, record="HETATM"),
            pdb_atom_line(11, (6.0, 3.5, 0.0), "O1", "LIG", "B", 101, record="HETATM"),
            pdb_atom_line(13, (40.0, 40.0, 40.0), "N1", "LIG", "B", 101, record="HETATM"),
        ],
    )
