"""Tests for reading atom records from PDB files."""

from decimal import Decimal

import pytest

from stericoverlap.core.exceptions import PDBFormatError, PointSetReadError
from stericoverlap.infrastructure.readers.pdb_atom_reader import PDBAtomReader

from conftest import pdb_atom_line, write_pdb


@pytest.fixture
def reader():
    return PDBAtomReader()


def test_reads_atom_and_hetatm_records(reader, receptor_pdb, ligand_pdb):
    receptor = reader.read(receptor_pdb)
    ligand = reader.read(ligand_pdb)

    assert [p.serial for p in receptor] == [1, 2, 3]
    assert [p.serial for p in ligand] == [12, 11, 13]
    assert receptor.label == receptor_pdb


def test_fields_follow_pdb_columns(reader):
    line = pdb_atom_line(
        1234, (-12.345, 6.789, 100.5), "OG1", "THR", "C", 87,
        record="HETATM", alt_loc="B", insertion_code="A",
    )
    point = reader.parse_atom_line(line)

    assert point.serial == 1234
    assert point.atom_name == "OG1"
    assert point.alt_loc == "B"
    assert point.residue_name == "THR"
    assert point.chain_id == "C"
    assert point.residue_seq == 87
    assert point.insertion_code == "A"
    assert point.centre.components == (Decimal("-12.345"), Decimal("6.789"), Decimal("100.500"))


def test_coordinates_keep_text_precision(reader):
    prefix = pdb_atom_line(1, (0, 0, 0), "N", "GLY")[:30]
    line = prefix + "  1.2345" + "-0.00100" + "  0.5000"
    point = reader.parse_atom_line(line)
    assert str(point.centre[0]) == "1.2345"
    assert point.centre[2] == Decimal("0.5")


def test_other_records_are_ignored(reader):
    lines = [
        "HEADER    TEST",
        "REMARK   1 ATOM records follow",
        pdb_atom_line(1, (0, 0, 0)),
        "ANISOU    1  CA  ALA A   1     1000   1000   1000      0      0      0",
        "TER       2      ALA A   1",
        "",
        "CONECT    1    2",
    ]
    points = reader.parse_lines(lines)
    assert len(points) == 1


def test_missing_file(reader, tmp_path):
    with pytest.raises(PointSetReadError, match="Could not open file"):
        reader.read(str(tmp_path / "missing.pdb"))


def test_empty_file_gives_empty_set(reader, tmp_path):
    path = write_pdb(tmp_path / "empty.pdb", [])
    assert len(reader.read(path)) == 0


GOOD_LINE = pdb_atom_line(1, (0.0, 0.0, 0.0))


@pytest.mark.parametrize(
    "line",
    [
        GOOD_LINE[:6] + "     X" + GOOD_LINE[12:],
        GOOD_LINE[:38] + "     abc" + GOOD_LINE[46:],
        GOOD_LINE[:40],
    ],
    ids=["serial", "coordinate", "short"],
)
def test_malformed_record(reader, tmp_path, line):
    path = write_pdb(tmp_path / "bad.pdb", [line])
    with pytest.raises(PDBFormatError) as excinfo:
        reader.read(path)
    assert excinfo.value.line_number == 2
    assert isinstance(excinfo.value, PointSetReadError)


def test_non_ascii_bytes_outside_atom_records(reader, tmp_path):
    path = tmp_path / "latin1.pdb"
    path.write_bytes(
        b"REMARK  caf\xe9 au lait\n" + pdb_atom_line(7, (1.0, 2.0, 3.0)).encode("ascii") + b"\nEND\n"
    )
    points = reader.read(str(path))
    assert [p.serial for p in points] == [7]
    assert points[0].centre.components == (Decimal("1"), Decimal("2"), Decimal("3"))
