"""Tests for the end-to-end clash detection service."""

import io
import logging

import pytest

from stericoverlap.core.config import DetectionConfig
from stericoverlap.core.domain.implementations import BruteForceClashDetector
from stericoverlap.core.exceptions import EmptyPointSetError, PointSetReadError
from stericoverlap.core.services.clash_detection_service import ClashDetectionService

from conftest import make_point_set, pdb_atom_line, write_pdb

EXPECTED_REPORT = (
    "11 LIG  101  O1 \n"
    "12 LIG  101  C1 \n"
    "Number of clashing atoms: 2\n"
)


@pytest.mark.parametrize("method", ["grid", "bruteforce"])
@pytest.mark.parametrize("dedup", ["full", "adjacent"])
def test_run_writes_sorted_unique_report(receptor_pdb, ligand_pdb, method, dedup):
    service = ClashDetectionService(DetectionConfig(method=method, dedup=dedup))
    output = io.StringIO()
    assert service.run(receptor_pdb, ligand_pdb, output)
    assert output.getvalue() == EXPECTED_REPORT


def test_run_is_repeatable(receptor_pdb, ligand_pdb):
    outputs = []
    for _ in range(2):
        output = io.StringIO()
        assert ClashDetectionService().run(receptor_pdb, ligand_pdb, output)
        outputs.append(output.getvalue())
    assert outputs[0] == outputs[1]


def test_grid_and_brute_force_reports_agree(tmp_path):
    receptor = write_pdb(
        tmp_path / "a.pdb",
        [pdb_atom_line(i + 1, (i * 1.7, (i % 5) * 2.1, (i % 3) * 2.9)) for i in range(40)],
    )
    ligand = write_pdb(
        tmp_path / "b.pdb",
        [pdb_atom_line(100 + i, (i * 1.3 + 2.0, (i % 4) * 2.6, 6.0 - i % 7)) for i in range(40)],
    )
    reports = []
    for method in ("grid", "bruteforce"):
        output = io.StringIO()
        assert ClashDetectionService(DetectionConfig(method=method)).run(receptor, ligand, output)
        reports.append(output.getvalue())
    assert reports[0] == reports[1]
    assert reports[0].splitlines()[-1] != "Number of clashing atoms: 0"


def test_missing_file_fails_without_output(tmp_path, receptor_pdb, caplog):
    output = io.StringIO()
    with caplog.at_level(logging.ERROR):
        assert not ClashDetectionService().run(receptor_pdb, str(tmp_path / "nope.pdb"), output)
    assert output.getvalue() == ""
    assert "Could not open file" in caplog.text


def test_empty_structure_fails_without_output(tmp_path, receptor_pdb):
    empty = write_pdb(tmp_path / "empty.pdb", [])
    output = io.StringIO()
    assert not ClashDetectionService().run(empty, receptor_pdb, output)
    assert output.getvalue() == ""


def test_malformed_structure_fails(tmp_path, receptor_pdb):
    bad = write_pdb(tmp_path / "bad.pdb", ["ATOM      1  CA  ALA A   1"])
    assert not ClashDetectionService().run(receptor_pdb, bad, io.StringIO())


def test_load_raises_for_empty_structure(tmp_path, receptor_pdb):
    empty = write_pdb(tmp_path / "empty.pdb", [])
    with pytest.raises(EmptyPointSetError):
        ClashDetectionService().load(receptor_pdb, empty)
    with pytest.raises(PointSetReadError):
        ClashDetectionService().load(receptor_pdb, str(tmp_path / "missing.pdb"))


def test_detect_returns_clash_result():
    service = ClashDetectionService(DetectionConfig(atom_radius=1.0))
    outer = make_point_set([(0, 0, 0)])
    inner = make_point_set([(1.5, 0, 0), (2.5, 0, 0)], start_serial=10)

    result = service.detect(outer, inner)

    assert result.has_clashes
    assert result.num_clashes == 1
    assert [r.sort_key for r in result.matches] == [10]
    assert result.method == "grid"
    assert "detection" in service.stats.stats


def test_custom_detector_is_used():
    detector = BruteForceClashDetector(atom_radius=2.0)
    service = ClashDetectionService(detector=detector)
    assert service.detector is detector

    outer = make_point_set([(0, 0, 0), (1, 0, 0)])
    inner = make_point_set([(0, 1, 0)], start_serial=5)
    result = service.detect(outer, inner)
    assert result.comparisons == 2
    assert result.num_clashes == 1


def test_run_logs_progress(receptor_pdb, ligand_pdb, caplog):
    with caplog.at_level(logging.INFO):
        ClashDetectionService().run(receptor_pdb, ligand_pdb, io.StringIO())
    assert "Size of molecules: 3 atoms and 3 atoms." in caplog.text
    assert "For the grid method: 2 matches found." in caplog.text
    assert "Total time taken" in caplog.text


def test_invalid_config_is_rejected():
    with pytest.raises(ValueError):
        ClashDetectionService(DetectionConfig(atom_radius=-1.0))


@pytest.mark.parametrize("method", ["grid", "bruteforce"])
def test_grid_building_is_timed_as_precalculation(method):
    service = ClashDetectionService(DetectionConfig(method=method))
    outer = make_point_set([(0, 0, 0)])
    inner = make_point_set([(1, 0, 0)], start_serial=10)

    service.detect(outer, inner)

    assert service.stats.get_stats("precalculation").count == 1
    assert service.stats.get_stats("detection").count == 1
    if method == "grid":
        assert outer[0].neighbor_cells is not None


def test_run_logs_precalculation_before_matches(receptor_pdb, ligand_pdb, caplog):
    with caplog.at_level(logging.INFO):
        assert ClashDetectionService().run(receptor_pdb, ligand_pdb, io.StringIO())
    messages = [r.getMessage() for r in caplog.records]
    precalc = next(i for i, m in enumerate(messages) if m.startswith("Time taken for pre-calculations"))
    found = next(i for i, m in enumerate(messages) if m.startswith("For the grid method"))
    assert precalc < found


def test_detect_rejects_empty_set_before_building_grid():
    service = ClashDetectionService()
    with pytest.raises(EmptyPointSetError):
        service.detect(make_point_set([(0, 0, 0)]), make_point_set([]))
    assert "precalculation" not in service.stats.stats
