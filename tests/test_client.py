import signal
from unittest.mock import patch

from sigtalk.client import USAGE, main, send_message
from sigtalk.protocol import Decoder, bit_for_signal


def _decode(calls):
    decoder = Decoder()
    out = []
    for _pid, signum in calls:
        byte = decoder.feed(bit_for_signal(signum))
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_send_message_delivers_all_bits():
    calls = []
    sent = send_message(77, "hey", delay=0, kill=lambda pid, sig: calls.append((pid, sig)))
    assert sent == len(calls) == 8 * 4
    assert {pid for pid, _ in calls} == {77}
    assert _decode(calls) == b"hey\0"


def test_send_message_uses_only_user_signals():
    calls = []
    send_message(5, "A", delay=0, kill=lambda pid, sig: calls.append((pid, sig)))
    assert {sig for _, sig in calls} <= {signal.SIGUSR1, signal.SIGUSR2}


def test_send_message_sleeps_after_each_bit():
    with patch("time.sleep") as sleep:
        sent = send_message(3, "a", delay=0.5, kill=lambda pid, sig: None)
    assert sleep.call_count == sent
    sleep.assert_called_with(0.5)


def test_main_wrong_argument_count(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == USAGE
    assert main(["1", "2", "3"]) == 1


def test_main_sends_to_parsed_pid():
    with patch("os.kill") as kill, patch("time.sleep"):
        assert main(["  +42xyz", "ok"]) == 0
    calls = [c.args for c in kill.call_args_list]
    assert {pid for pid, _ in calls} == {42}
    assert _decode(calls) == b"ok\0"


def test_main_reports_failed_delivery(capsys):
    with patch("os.kill", side_effect=ProcessLookupError("gone")), patch("time.sleep"):
        assert main(["99", "hi"]) == 1
    assert "99" in capsys.readouterr().err