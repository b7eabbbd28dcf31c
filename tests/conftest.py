"""Shared test fixtures for Code Overview."""

from pathlib import Path

import pytest

from code_overview.scanning.models import SourceFile


def make_source(name: str, code_lines: int, extra: str = "") -> SourceFile:
    """A file with exactly ``code_lines`` weighted lines plus comment noise."""
    body = "\n".join(f"int v{i} = {i};" for i in range(code_lines))
    content = f"// {name}\n\n{extra}{body}\n"
    return SourceFile(name=name, content=content, path=f"Assets/{name}.cs")


@pytest.fixture
def source():
    """Factory for in-memory source files."""
    return make_source


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small Unity-like project on disk."""
    assets = tmp_path / "Assets"
    (assets / "Scripts").mkdir(parents=True)
    (assets / "Editor").mkdir()
    (assets / "Plugins").mkdir()

    player = ["using UnityEngine;", "", "public class Player : MonoBehaviour", "{"]
    player += [f"    int field{i};" for i in range(200)]
    player += ["}"]
    (assets / "Scripts" / "Player.cs").write_text("\n".join(player) + "\n")

    (assets / "Scripts" / "IDamageable.cs").write_text(
        "public interface IDamageable\n{\n    void Hit(int amount);\n}\n"
    )
    (assets / "Scripts" / "Util.cs").write_text(
        "// helpers\npublic static class Util\n{\n    public static int Twice(int x) => x * 2;\n}\n"
    )
    (assets / "Editor" / "PlayerEditor.cs").write_text(
        "using UnityEditor;\n\npublic class PlayerEditor : Editor\n{\n}\n"
    )
    (assets / "Plugins" / "Vendor.cs").write_text("public class Vendor\n{\n}\n")
    (assets / "Scripts" / "notes.txt").write_text("not a script\n")
    return tmp_path
