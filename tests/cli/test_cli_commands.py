"""Tests for the ecokit CLI commands."""

from __future__ import annotations

import argparse
import json

import pandas as pd
import pytest
import yaml

from ecokit.interfaces.cli import main as cli
from ecokit.interfaces.cli.main import (
    build_parser,
    cmd_check_url,
    cmd_file_size,
    cmd_mkdir,
    cmd_n_unique,
    cmd_split,
    cmd_split_csv,
    main,
)


@pytest.fixture
def species_csv(tmp_path, species_df):
    path = tmp_path / "species.csv"
    species_df.to_csv(path, index=False)
    return path


class TestCmdNUnique:
    """Tests for the n-unique command."""

    def test_missing_file(self, tmp_path):
        args = argparse.Namespace(csv=str(tmp_path / "none.csv"), no_arrange=False, format="text")
        assert cmd_n_unique(args) == 2

    def test_json_output(self, species_csv, capsys):
        args = argparse.Namespace(csv=str(species_csv), no_arrange=False, format="json")
        assert cmd_n_unique(args) == 0

        records = json.loads(capsys.readouterr().out)
        assert records[0] == {"variable": "year", "n_unique": 6}
        assert [r["variable"] for r in records] == ["year", "species", "country", "flag"]

    def test_yaml_output_keeps_column_order(self, species_csv, capsys):
        args = argparse.Namespace(csv=str(species_csv), no_arrange=True, format="yaml")
        assert cmd_n_unique(args) == 0

        records = yaml.safe_load(capsys.readouterr().out)
        assert [r["variable"] for r in records] == ["species", "country", "year", "flag"]

    def test_text_output(self, species_csv, capsys):
        args = argparse.Namespace(csv=str(species_csv), no_arrange=False, format="text")
        assert cmd_n_unique(args) == 0
        out = capsys.readouterr().out
        assert "variable" in out
        assert "n_unique" in out


class TestCmdSplit:
    """Tests for the split and split-csv commands."""

    def test_split_values(self, capsys):
        args = argparse.Namespace(values=["a", "b", "c", "d", "e"], n_splits=2, prefix="Chunk")
        assert cmd_split(args) == 0
        assert json.loads(capsys.readouterr().out) == {
            "Chunk_1": ["a", "b", "c"],
            "Chunk_2": ["d", "e"],
        }

    def test_split_too_many(self):
        args = argparse.Namespace(values=["a"], n_splits=2, prefix="Chunk")
        assert cmd_split(args) == 2

    def test_split_csv_writes_chunks(self, species_csv, tmp_path):
        out_dir = tmp_path / "chunks"
        args = argparse.Namespace(
            csv=str(species_csv), out_dir=str(out_dir), chunk_size=None, n_chunks=2, prefix="Part"
        )
        assert cmd_split_csv(args) == 0

        files = sorted(p.name for p in out_dir.glob("*.csv"))
        assert files == ["Part_1.csv", "Part_2.csv"]
        assert len(pd.read_csv(out_dir / "Part_1.csv")) == 3

    def test_split_csv_invalid_chunk_size(self, species_csv, tmp_path):
        args = argparse.Namespace(
            csv=str(species_csv), out_dir=str(tmp_path / "x"), chunk_size=100, n_chunks=None, prefix="Chunk"
        )
        assert cmd_split_csv(args) == 2
        assert not (tmp_path / "x").exists()


class TestOtherCommands:
    def test_check_url_reports_failures(self, monkeypatch, capsys):
        monkeypatch.setattr(
            "ecokit.general.urls.check_url",
            lambda urls, **kwargs: [u.endswith("ok") for u in urls],
        )
        args = argparse.Namespace(urls=["https://a.org/ok", "https://a.org/bad"], timeout=2.0, progress=False)
        assert cmd_check_url(args) == 1
        out = capsys.readouterr().out.splitlines()
        assert out == ["OK   https://a.org/ok", "FAIL https://a.org/bad"]

    def test_check_url_invalid_timeout(self):
        args = argparse.Namespace(urls=["https://a.org"], timeout=0.0, progress=False)
        assert cmd_check_url(args) == 2

    def test_file_size(self, tmp_path, capsys):
        path = tmp_path / "f.bin"
        path.write_bytes(b"0" * 1536)
        args = argparse.Namespace(paths=[str(path), str(tmp_path / "missing")], standard="IEC", digits=1)
        assert cmd_file_size(args) == 2
        assert capsys.readouterr().out.startswith("1.5 KiB\t")

    def test_mkdir(self, tmp_path):
        args = argparse.Namespace(paths=[str(tmp_path / "a" / "b")])
        assert cmd_mkdir(args) == 0
        assert (tmp_path / "a" / "b").is_dir()


def test_parser_upper_cases_standard():
    args = build_parser().parse_args(["file-size", "x.bin", "--standard", "si"])
    assert args.standard == "SI"
    assert args.func is cli.cmd_file_size


def test_parser_chunk_options_are_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["split-csv", "a.csv", "--out-dir", "o", "--chunk-size", "2", "--n-chunks", "2"])


def test_main_os(capsys):
    assert main(["os"]) == 0
    assert capsys.readouterr().out.strip() != ""
