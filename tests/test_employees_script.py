from __future__ import annotations

import importlib.util
import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from empresa.core import config as core_config  # noqa: E402


@pytest.fixture()
def script(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("EMPRESA_STORE_PATH", raising=False)
    monkeypatch.delenv("EMPRESA_EXPORT_PATH", raising=False)
    monkeypatch.delenv("EMPRESA_EXPORT_MIRROR_STORE", raising=False)
    core_config.get_settings.cache_clear()
    spec = importlib.util.spec_from_file_location("employees_script", ROOT / "scripts" / "employees.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    yield module
    core_config.get_settings.cache_clear()


def test_add_remove_list_export(script, tmp_path, capsys):
    store = str(tmp_path / "team.json")
    script.main(["--store", store, "add", "--name", "Jane Doe", "--position", "Manager", "--extra", "email=j@x.io"])
    script.main(["--store", store, "add", "--name", "John", "--position", "Dev"])
    script.main(["--store", store, "remove", "1"])
    script.main(["--store", store, "list"])
    script.main(["--store", store, "export"])

    out = capsys.readouterr().out
    assert "OK: employee 1 added" in out
    assert "2\tJohn\tDev" in out
    assert json.loads(Path(store).read_text(encoding="utf-8")) == [{"id": 2, "name": "John", "position": "Dev"}]
    assert (tmp_path / "employees.yaml").exists()


def test_extra_must_be_key_value(script):
    with pytest.raises(SystemExit, match="Invalid extra"):
        script.main(["add", "--name", "A", "--position", "B", "--extra", "oops"])


def test_id_override_is_not_an_extra(script, tmp_path):
    with pytest.raises(SystemExit, match="Reserved field: id_override"):
        script.main(["add", "--name", "A", "--position", "B", "--extra", "id_override=9"])
    assert not (tmp_path / "employees.json").exists()


def test_self_is_stored_as_plain_extra(script, tmp_path):
    script.main(["add", "--name", "A", "--position", "B", "--extra", "self=x"])
    data = json.loads((tmp_path / "employees.json").read_text(encoding="utf-8"))
    assert data == [{"id": 1, "name": "A", "position": "B", "self": "x"}]
