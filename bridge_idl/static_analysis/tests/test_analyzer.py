"""
Tests for the batch analyzer, source discovery and JSON output.
"""

import json
import shutil
import tempfile
import unittest
from pathlib import Path

from bridge_idl.static_analysis.core.analyzer import BridgeAnalyzer
from bridge_idl.static_analysis.core.file_utils import find_source_files, get_blob_filename, load_blob
from bridge_idl.static_analysis.core.output_formatter import format_as_json
from bridge_idl.static_analysis.model.model import Blob
from bridge_idl.static_analysis.parsers.errors import UnsupportedMemberNameError


class TestBridgeAnalyzer(unittest.TestCase):
    """Test cases for the BridgeAnalyzer class."""

    def setUp(self):
        """Set up the test case."""
        self.analyzer = BridgeAnalyzer()
        self.fixtures_dir = Path(__file__).parent / 'fixtures' / 'typescript'
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_analyze_blob(self):
        blob = load_blob(self.fixtures_dir / 'canvas.d.ts')
        result = self.analyzer.analyze_blob(blob)
        self.assertEqual(result.filename, 'canvas')
        self.assertEqual(result.source_file, blob.source_file)
        self.assertEqual([c.name for c in result.objects], ['CanvasRenderingContext2D', 'TextMetrics'])

    def test_analyze_blob_propagates_unsupported_name(self):
        blob = load_blob(self.fixtures_dir / 'computed_name.d.ts')
        with self.assertRaises(UnsupportedMemberNameError):
            self.analyzer.analyze_blob(blob)

    def test_failing_unit_is_isolated(self):
        blobs = [
            Blob(source_file='first.d.ts', filename='first', raw='interface First { a: string; }'),
            Blob(source_file='broken.d.ts', filename='broken', raw='interface Broken { [Symbol.x]: string; }'),
            Blob(source_file='last.d.ts', filename='last', raw='interface Last { b(): void; }'),
        ]
        output = self.analyzer.analyze_blobs(blobs)

        self.assertEqual([u.filename for u in output.units], ['first', 'last'])
        self.assertEqual(output.units[0].objects[0].name, 'First')
        self.assertEqual(output.units[1].objects[0].methods[0].name, 'b')
        self.assertEqual(len(output.failures), 1)
        self.assertEqual(output.failures[0].source_file, 'broken.d.ts')
        self.assertEqual(output.failures[0].node_type, 'computed_property_name')

    def test_analyze_sources_writes_json(self):
        output_file = self.temp_dir / 'out' / 'objects.json'
        output = self.analyzer.analyze_sources([str(self.fixtures_dir)], output_file=output_file)

        self.assertEqual([u.filename for u in output.units], ['canvas', 'element'])
        self.assertEqual([Path(f.source_file).name for f in output.failures], ['computed_name.d.ts'])

        with open(output_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
        canvas = data['units'][0]['objects'][0]
        self.assertEqual(canvas['name'], 'CanvasRenderingContext2D')
        self.assertEqual(canvas['baseType'], 'HostClass')
        self.assertEqual(canvas['properties'][0], {'name': 'fillStyle', 'kind': 'string'})
        self.assertEqual(canvas['methods'][0]['arguments'][0], {'name': 'x', 'type': 'number', 'required': True})
        self.assertEqual(data['failures'][0]['node_type'], 'computed_property_name')

    def test_format_as_json_omits_nothing(self):
        output = self.analyzer.analyze_blobs([
            Blob(source_file='a.d.ts', filename='a', raw='interface A {}'),
        ])
        data = json.loads(format_as_json(output))
        self.assertEqual(data['units'][0]['objects'][0], {
            'name': 'A', 'baseType': None, 'properties': [], 'methods': [],
        })


class TestFileUtils(unittest.TestCase):
    """Test cases for source discovery."""

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        (self.temp_dir / 'dom').mkdir()
        (self.temp_dir / 'node_modules').mkdir()
        for relative in ['dom/node.d.ts', 'dom/element.d.ts', 'dom/util.ts', 'index.d.ts', 'node_modules/lib.d.ts']:
            (self.temp_dir / relative).write_text('interface X {}', encoding='utf-8')

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_find_source_files(self):
        files = list(find_source_files([str(self.temp_dir)], exclude=['node_modules']))
        relative = [f.relative_to(self.temp_dir).as_posix() for f in files]
        self.assertEqual(relative, ['index.d.ts', 'dom/element.d.ts', 'dom/node.d.ts'])

    def test_find_source_files_with_extensions(self):
        files = list(find_source_files([str(self.temp_dir / 'dom')], extensions=('.ts',)))
        self.assertEqual(sorted(f.name for f in files), ['element.d.ts', 'node.d.ts', 'util.ts'])

    def test_missing_directory(self):
        with self.assertRaises(FileNotFoundError):
            list(find_source_files([str(self.temp_dir / 'missing')]))

    def test_get_blob_filename(self):
        self.assertEqual(get_blob_filename(Path('dom/element.d.ts')), 'element')
        self.assertEqual(get_blob_filename(Path('util.ts'), ('.ts', '.d.ts')), 'util')
        self.assertEqual(get_blob_filename(Path('types.d.ts'), ('.ts', '.d.ts')), 'types')
        self.assertEqual(get_blob_filename(Path('readme.md')), 'readme')

    def test_load_blob(self):
        blob = load_blob(self.temp_dir / 'index.d.ts')
        self.assertEqual(blob.filename, 'index')
        self.assertEqual(blob.raw, 'interface X {}')


if __name__ == '__main__':
    unittest.main()
