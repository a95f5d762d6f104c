import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "gradient"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from splashgen_core.preferences import (
    gradient_preferences,
    read_build_config_preference,
    read_preference,
    resolve_gradient_preference,
)

CONFIG_XML = """<?xml version='1.0' encoding='utf-8'?>
<widget id="com.example.app" version="1.0.0" xmlns="http://www.w3.org/ns/widgets" xmlns:cdv="http://cordova.apache.org/ns/1.0">
    <name>Example</name>
    <preference name="SPLASH_GRADIENT" value="linear-gradient(64.28deg, #001833 0%, #004390 100%)" />
    <preference name="BackgroundColor" value="#001833" />
    <platform name="ios">
        <preference name="splash_gradient" value="radial-gradient(circle, #abcdef 0%, #123456 100%)" />
    </platform>
</widget>
"""


class PreferenceTests(unittest.TestCase):
    def test_reads_namespaced_config_xml(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.xml"
            path.write_text(CONFIG_XML, encoding="utf-8")
            self.assertEqual(
                read_preference(path, "SPLASH_GRADIENT"),
                "linear-gradient(64.28deg, #001833 0%, #004390 100%)",
            )
            self.assertEqual(read_preference(path, "backgroundcolor"), "#001833")
            self.assertIsNone(read_preference(path, "Missing"))

    def test_platform_override(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.xml"
            path.write_text(CONFIG_XML, encoding="utf-8")
            self.assertTrue(read_preference(path, "SPLASH_GRADIENT", platform="ios").startswith("radial-gradient"))
            self.assertTrue(read_preference(path, "SPLASH_GRADIENT", platform="android").startswith("linear-gradient"))

    def test_platform_name_is_case_insensitive(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.xml"
            path.write_text(CONFIG_XML, encoding="utf-8")
            self.assertTrue(read_preference(path, "SPLASH_GRADIENT", platform="iOS").startswith("radial-gradient"))

    def test_gradient_preferences_per_platform(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "config.xml").write_text(CONFIG_XML, encoding="utf-8")
            prefs = gradient_preferences(root, ["android", "ios"])
            self.assertEqual(prefs["android"], "linear-gradient(64.28deg, #001833 0%, #004390 100%)")
            self.assertEqual(prefs["ios"], "radial-gradient(circle, #abcdef 0%, #123456 100%)")

    def test_invalid_xml_returns_none(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.xml"
            path.write_text("<widget><preference", encoding="utf-8")
            self.assertIsNone(read_preference(path, "SPLASH_GRADIENT"))

    def test_build_config_fallback(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            data_dir = root / ".cordova-app-data"
            data_dir.mkdir()
            (data_dir / "build-config.json").write_text(
                json.dumps({"preferences": {"SPLASH_GRADIENT": "linear-gradient(90deg, #000000 0%, #ffffff 100%)"}}),
                encoding="utf-8",
            )
            self.assertEqual(
                read_build_config_preference(root, "SPLASH_GRADIENT"),
                "linear-gradient(90deg, #000000 0%, #ffffff 100%)",
            )
            self.assertEqual(
                resolve_gradient_preference(root),
                "linear-gradient(90deg, #000000 0%, #ffffff 100%)",
            )

    def test_config_xml_wins_over_build_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "config.xml").write_text(CONFIG_XML, encoding="utf-8")
            data_dir = root / ".cordova-app-data"
            data_dir.mkdir()
            (data_dir / "build-config.json").write_text(
                json.dumps({"preferences": {"SPLASH_GRADIENT": "linear-gradient(90deg, #000000 0%, #ffffff 100%)"}}),
                encoding="utf-8",
            )
            self.assertTrue(resolve_gradient_preference(root).startswith("linear-gradient(64.28deg"))

    def test_absent_everywhere(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsNone(resolve_gradient_preference(Path(tmp)))


if __name__ == "__main__":
    unittest.main()
