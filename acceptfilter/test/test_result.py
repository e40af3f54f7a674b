import logging
from unittest.mock import Mock

import pytest
from colorama import Fore

from acceptfilter.negotiator import result


def test_fail_logs_error(monkeypatch):
    monkeypatch.setattr(result, 'log', Mock())
    r = result.CaptureResult()
    assert r.fail('message') is False
    assert r.success is False
    result.log.error.assert_called_once_with('message')


def test_info_logs_info(monkeypatch):
    monkeypatch.setattr(result, 'log', Mock())
    r = result.CaptureResult()
    r.info('message')
    assert r.success is True
    result.log.info.assert_called_once_with('message')


@pytest.mark.parametrize('levelno, color', [
    (logging.DEBUG, ''),
    (logging.INFO, ''),
    (logging.WARNING, Fore.YELLOW),
    (logging.ERROR, Fore.RED),
    (logging.CRITICAL, Fore.RED),
])
def test_level_color(levelno, color):
    assert result.level_color(levelno) == color


def test_start_resets_previous_check(capsys):
    r = result.CaptureResult()
    r.start('first')
    r.fail('message1')
    r.start('second')
    r.end()
    captured = capsys.readouterr()
    assert "PASSED" in captured.out
    assert "message1" not in captured.out


def test_CaptureResult_for_passing_check(capsys):
    r = result.CaptureResult()
    r.start('Content-Type: text/plain')
    r.end()
    captured = capsys.readouterr()
    assert "Content-Type: text/plain" in captured.out
    assert "PASSED" in captured.out


def test_CaptureResult_for_failing_check(capsys):
    r = result.CaptureResult()
    r.start('Content-Type: text/plain')
    r.fail("message1")
    r.end()
    captured = capsys.readouterr()
    assert "FAILED" in captured.out
    assert "message1" in captured.out


def test_CaptureResult_for_passing_check_with_info(capsys):
    r = result.CaptureResult()
    r.start('Content-Type: text/plain')
    r.info("message1")
    r.end()
    captured = capsys.readouterr()
    assert "PASSED" in captured.out
    assert "message1" in captured.out


def test_CaptureResult_quiet_hides_info(capsys):
    r = result.CaptureResult(level=logging.WARNING)
    r.start('Content-Type: text/plain')
    r.info("message1")
    r.end()
    captured = capsys.readouterr()
    assert "PASSED" in captured.out
    assert "message1" not in captured.out
