"""
Tests for the svgops command line.
"""

import json
import os
import tempfile
import unittest

from svgops.config import CompilerSettings, load_settings, settings_from_dict
from svgops.io.program_io import load_documents
from svgops.main import EXIT_COMPILE, EXIT_USAGE, build_parser, main

GOOD = ('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">\n'
        '<rect width="10" height="10" fill="#336699"/>\n'
        '</svg>\n')
BAD = ('<svg xmlns="http://www.w3.org/2000/svg">\n'
       '<image href="x.png"/>\n'
       '</svg>\n')


class TestSettings(unittest.TestCase):
    """Test CompilerSettings."""

    def test_defaults_valid(self):
        settings = CompilerSettings()
        self.assertEqual(settings.output, 'svg_images.py')
        self.assertEqual(settings.validate(), (True, ''))

    def test_invalid(self):
        self.assertFalse(CompilerSettings(output_format='yaml').validate()[0])
        self.assertFalse(CompilerSettings(jobs=0).validate()[0])
        self.assertFalse(CompilerSettings(output='').validate()[0])

    def test_merged_skips_none(self):
        settings = CompilerSettings(jobs=4).merged({'jobs': None, 'output': 'x.py'})
        self.assertEqual(settings.jobs, 4)
        self.assertEqual(settings.output, 'x.py')

    def test_unknown_key(self):
        with self.assertRaises(ValueError):
            settings_from_dict({'outptu': 'x.py'})

    def test_load(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'svgops.json')
            with open(path, 'w', encoding='utf-8') as f:
                json.dump({'output_format': 'json', 'symbol_prefix': 'Icon_'}, f)
            settings = load_settings(path)
        self.assertEqual(settings.output_format, 'json')
        self.assertEqual(settings.symbol_prefix, 'Icon_')


class TestMain(unittest.TestCase):
    """Test the main entry point."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def _write(self, name, text):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path

    def _out(self, name):
        return os.path.join(self.tmpdir.name, name)

    def test_parser_defaults_are_none(self):
        args = build_parser().parse_args(['a.svg'])
        self.assertIsNone(args.output)
        self.assertIsNone(args.verbose)
        self.assertEqual(args.files, ['a.svg'])

    def test_python_output(self):
        src = self._write('square.svg', GOOD)
        out = self._out('icons.py')
        self.assertEqual(main(['-o', out, src]), 0)
        with open(out, encoding='utf-8') as f:
            source = f.read()
        self.assertIn('Image_square = Image(', source)

    def test_json_output(self):
        src = self._write('square.svg', GOOD)
        out = self._out('icons.json')
        self.assertEqual(main(['-o', out, '-f', 'json', '--prefix', 'Icon_', src]), 0)
        self.assertEqual(list(load_documents(out)), ['Icon_square'])

    def test_config_file(self):
        src = self._write('square.svg', GOOD)
        out = self._out('from_config.json')
        config = self._write('svgops.json', json.dumps({'output': out, 'output_format': 'json'}))
        self.assertEqual(main(['-c', config, src]), 0)
        self.assertTrue(os.path.exists(out))

    def test_no_files(self):
        self.assertEqual(main(['-o', self._out('x.py')]), EXIT_USAGE)

    def test_bad_config(self):
        config = self._write('broken.json', '{not json')
        self.assertEqual(main(['-c', config, 'a.svg']), EXIT_USAGE)

    def test_invalid_jobs(self):
        src = self._write('square.svg', GOOD)
        self.assertEqual(main(['-j', '0', '-o', self._out('x.py'), src]), EXIT_USAGE)

    def test_duplicate_names(self):
        os.mkdir(self._out('other'))
        a = self._write('square.svg', GOOD)
        b = self._write(os.path.join('other', 'square.svg'), GOOD)
        self.assertEqual(main(['-o', self._out('x.py'), a, b]), EXIT_USAGE)

    def test_compile_error_writes_nothing(self):
        good = self._write('good.svg', GOOD)
        bad = self._write('bad.svg', BAD)
        out = self._out('icons.py')
        with self.assertLogs('svgops.main', level='ERROR') as logs:
            self.assertEqual(main(['-o', out, good, bad]), EXIT_COMPILE)
        self.assertFalse(os.path.exists(out))
        self.assertIn('bad.svg:2: unsupported tag: <image>', logs.output[0])

    def test_missing_file(self):
        out = self._out('icons.py')
        self.assertEqual(main(['-o', out, self._out('missing.svg')]), EXIT_COMPILE)
        self.assertFalse(os.path.exists(out))


if __name__ == '__main__':
    unittest.main()
