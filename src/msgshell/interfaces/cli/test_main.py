import io
import logging as std_logging
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from msgshell.core.config import LOG_LEVEL_ENV_VAR
from msgshell.interfaces.cli.main import cli, join_command_line


class TestCli(unittest.TestCase):
    def setUp(self):
        root = std_logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level

        def restore():
            root.handlers = saved_handlers
            root.setLevel(saved_level)
        self.addCleanup(restore)

        env = mock.patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop(LOG_LEVEL_ENV_VAR, None)

        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def invoke(self, args):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                cli(args)
        return ctx.exception.code, out.getvalue(), err.getvalue()

    def write(self, name, content):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_run_write_message(self):
        code, out, _err = self.invoke(['run', '/write-message', 'hello'])
        self.assertEqual(code, 0)
        self.assertEqual(out, 'Your message: hello\n')

    def test_run_keeps_grouped_argument(self):
        code, out, _err = self.invoke(['run', '/write-message', 'hello world'])
        self.assertEqual(code, 0)
        self.assertEqual(out, 'Your message: hello world\n')

    def test_run_named_message(self):
        code, out, _err = self.invoke(['run', '/write-message', '--message=hi'])
        self.assertEqual(code, 0)
        self.assertEqual(out, 'Your message: hi\n')

    def test_run_named_message_with_spaces(self):
        code, out, _err = self.invoke(['run', '/write-message', '--message=hello world'])
        self.assertEqual(code, 0)
        self.assertEqual(out, 'Your message: hello world\n')

    def test_run_dash_message(self):
        code, out, _err = self.invoke(['run', '/write-message', '-x'])
        self.assertEqual(code, 0)
        self.assertEqual(out, 'Your message: -x\n')

    def test_run_end_of_options(self):
        code, out, _err = self.invoke(['run', '/write-message', '--', '--loud'])
        self.assertEqual(code, 0)
        self.assertEqual(out, 'Your message: --loud\n')

    def test_run_without_command_line(self):
        code, _out, err = self.invoke(['run'])
        self.assertEqual(code, 2)
        self.assertIn('COMMAND_LINE', err)

    def test_run_logs_cli_event(self):
        with self.assertLogs('msgshell.interfaces.cli.main', level='DEBUG') as captured:
            self.invoke(['run', '/help'])
        actions = [getattr(record, 'action', None) for record in captured.records]
        self.assertIn('cli_started', actions)

    def test_run_missing_message(self):
        code, out, err = self.invoke(['run', '/write-message'])
        self.assertEqual(code, 1)
        self.assertEqual(out, '')
        self.assertIn("Error: Missing mandatory parameter 'message'", err)

    def test_run_with_config_prefix(self):
        config = self.write('msgshell.yaml', "command_prefix: '!'\n")
        code, out, _err = self.invoke(['--config', config, 'run', '!write-message', 'hi'])
        self.assertEqual(code, 0)
        self.assertEqual(out, 'Your message: hi\n')

    def test_bad_config(self):
        code, _out, err = self.invoke(['--config', os.path.join(self.tmpdir.name, 'missing.yaml'), 'run', '/help'])
        self.assertEqual(code, 2)
        self.assertIn('Error loading config', err)

    def test_no_command_prints_help(self):
        code, out, _err = self.invoke([])
        self.assertEqual(code, 0)
        self.assertIn('usage: msgshell', out)

    def test_batch(self):
        script = self.write('script.txt', '# demo\n/write-message one\n/write-message "two words"\n')
        code, out, _err = self.invoke(['batch', script])
        self.assertEqual(code, 0)
        self.assertEqual(out, 'Your message: one\nYour message: two words\n')

    def test_batch_with_failure(self):
        script = self.write('script.txt', '/write-message\n/write-message ok\n')
        code, out, err = self.invoke(['batch', script])
        self.assertEqual(code, 1)
        self.assertEqual(out, 'Your message: ok\n')
        self.assertIn('Error:', err)

    def test_batch_dry_run(self):
        script = self.write('script.txt', '/write-message one\n')
        code, out, _err = self.invoke(['batch', script, '--dry-run'])
        self.assertEqual(code, 0)
        self.assertEqual(out, '/write-message one\n')

    def test_batch_missing_script(self):
        code, _out, err = self.invoke(['batch', os.path.join(self.tmpdir.name, 'missing.txt')])
        self.assertEqual(code, 2)
        self.assertIn('Script file not found', err)

    def test_interactive(self):
        stdin = io.StringIO('  /write-message hi  \n\n/nope\n/quit\n  /exit\n/write-message never\n')
        with mock.patch('sys.stdin', stdin):
            code, out, err = self.invoke(['interactive'])
        self.assertEqual(code, 0)
        self.assertEqual(out, 'Your message: hi\n')
        self.assertIn('Unknown command: quit', err)
        self.assertIn('Unknown command: nope', err)


class TestJoinCommandLine(unittest.TestCase):
    def test_single_word(self):
        self.assertEqual(join_command_line(['/write-message "a b"']), '/write-message "a b"')

    def test_requotes_arguments(self):
        self.assertEqual(join_command_line(['/write-message', 'a b']), "/write-message 'a b'")
        self.assertEqual(join_command_line(['/write-message', 'plain']), '/write-message plain')

    def test_named_value_is_quoted_but_stays_an_option(self):
        self.assertEqual(
            join_command_line(['/write-message', '--message=a b']),
            "/write-message --message='a b'"
        )
        self.assertEqual(join_command_line(['/write-message', '-x']), '/write-message -x')


if __name__ == '__main__':
    unittest.main()
