import json
from pathlib import Path

import alarmdecoder_lib

_MANIFEST = Path(__file__).resolve().parents[1] / "custom_components" / "alarmdecoder_bridge" / "manifest.json"


def test_manifest_requires_the_library_release():
    manifest = json.loads(_MANIFEST.read_text())

    assert f"alarmdecoder-bridge=={alarmdecoder_lib.__version__}" in manifest["requirements"]
    assert manifest["version"] == alarmdecoder_lib.__version__
    assert "http" in manifest["dependencies"]
