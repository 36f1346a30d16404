import io
import signal

import pytest

from sigtalk.protocol import TERMINATOR, encode_bits, signal_for_bit
from sigtalk.server import Server


def _make_server():
    calls = []
    out = io.StringIO()
    server = Server(output=out, kill=lambda pid, sig: calls.append((pid, sig)))
    return server, out, calls


def _deliver(server, message, sender=None):
    return [server.handle(signal_for_bit(bit), sender) for bit in encode_bits(message)]


def test_message_printed_and_acknowledged():
    server, out, calls = _make_server()
    _deliver(server, "hi", sender=1234)
    assert out.getvalue() == "hi\n"
    assert calls == [(1234, signal.SIGUSR1)]


def test_no_ack_without_sender():
    server, out, calls = _make_server()
    _deliver(server, "quiet")
    assert out.getvalue() == "quiet\n"
    assert calls == []


def test_consecutive_messages():
    server, out, calls = _make_server()
    _deliver(server, "one", sender=10)
    _deliver(server, "two", sender=20)
    assert out.getvalue() == "one\ntwo\n"
    assert [pid for pid, _ in calls] == [10, 20]


def test_multibyte_text_round_trip():
    server, out, _ = _make_server()
    _deliver(server, "héllo wörld", sender=1)
    assert out.getvalue() == "héllo wörld\n"


def test_handle_returns_completed_bytes():
    server, _, _ = _make_server()
    results = [r for r in _deliver(server, "ab") if r is not None]
    assert results == [ord("a"), ord("b"), TERMINATOR]


def test_partial_byte_writes_nothing():
    server, out, calls = _make_server()
    bits = list(encode_bits("z"))[:5]
    for bit in bits:
        assert server.handle(signal_for_bit(bit), 9) is None
    assert out.getvalue() == ""
    assert calls == []


def test_foreign_signal_rejected():
    server, _, _ = _make_server()
    with pytest.raises(ValueError):
        server.handle(signal.SIGTERM, 1)