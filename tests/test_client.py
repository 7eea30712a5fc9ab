import io
import signal
from unittest import mock

import pytest

from minitalk.client import UsageError, main, parse_args, send_message
from minitalk.server import Server


@pytest.fixture
def signals():
    with mock.patch("os.kill") as kill, \
            mock.patch("signal.sigwait") as sigwait, \
            mock.patch("signal.pthread_sigmask") as mask:
        yield kill, sigwait, mask


def test_parse_args_reads_pid_and_message():
    assert parse_args(["4242", "hi there"]) == (4242, "hi there")


def test_parse_args_uses_leading_number():
    assert parse_args(["  +42abc", "m"]) == (42, "m")


@pytest.mark.parametrize("argv", [[], ["4242"], ["4242", "a", "b"]])
def test_parse_args_wrong_count(argv):
    with pytest.raises(UsageError, match="Check the arguments"):
        parse_args(argv)


@pytest.mark.parametrize("pid_text", ["abc", "0", "-12"])
def test_parse_args_rejects_bad_pid(pid_text):
    with pytest.raises(UsageError):
        parse_args([pid_text, "msg"])


def test_send_message_rejects_bad_pid(signals):
    kill, _, _ = signals
    with pytest.raises(ValueError):
        send_message(0, "x")
    assert kill.call_count == 0


def test_send_message_round_trips_through_server(signals):
    kill, sigwait, mask = signals
    output = io.BytesIO()
    acks = []
    server = Server(output=output, acknowledge=acks.append)
    kill.side_effect = lambda pid, signum: server.handle(signum, 777)
    send_message(4242, "hello")
    assert output.getvalue() == b"hello\n"
    assert acks == [777] * 6
    assert sigwait.call_count == 6
    assert {call.args[0] for call in kill.call_args_list} == {4242}
    assert mask.call_args_list[-1].args[0] == signal.SIG_SETMASK


def test_send_message_uses_only_user_signals(signals):
    kill, _, _ = signals
    output = io.BytesIO()
    acks = []
    server = Server(output=output, acknowledge=acks.append)
    kill.side_effect = lambda pid, signum: server.handle(signum, 555)
    send_message(99, b"\x00\xff")
    assert output.getvalue() == b"\x00\xff\n"
    assert acks == [555] * 3
    sent = [call.args[1] for call in kill.call_args_list]
    assert len(sent) == 24
    assert set(sent) == {signal.SIGUSR1, signal.SIGUSR2}
    assert sent[:8] == [signal.SIGUSR1] * 8
    assert sent[8:16] == [signal.SIGUSR2] * 8


def test_main_sends_message(signals):
    kill, sigwait, _ = signals
    assert main(["4242", "ok"]) == 0
    assert kill.call_count == 24
    assert sigwait.call_count == 3


def test_main_reports_usage_error(capsys, signals):
    kill, _, _ = signals
    assert main(["4242"]) == 1
    assert capsys.readouterr().out == "Error.\nCheck the arguments\n "
    assert kill.call_count == 0


def test_main_reports_bad_pid(capsys):
    assert main(["nope", "msg"]) == 1
    assert capsys.readouterr().out == "Error.\nCheck the arguments\n"


def test_main_reports_missing_server(capsys, signals):
    kill, _, _ = signals
    kill.side_effect = ProcessLookupError
    assert main(["4242", "msg"]) == 1
    assert capsys.readouterr().out == "Error.\nCheck the arguments\n"