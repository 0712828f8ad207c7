"""Tests for the per-platform thread id codecs."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.errors import DecodingError, ValidationError
from platforms.gchat import thread_utils as gchat
from platforms.gchat.thread_utils import GChatThreadCodec, GChatThreadId
from platforms.protocol import ThreadCodec
from platforms.telegram import thread_utils as telegram
from platforms.telegram.thread_utils import TelegramThreadCodec, TelegramThreadId
from platforms.webex import thread_utils as webex
from platforms.webex.thread_utils import WebexThreadCodec, WebexThreadId


class TestGChatEncode:
    """Tests for gchat.encode_thread_id."""

    def test_space_only(self):
        assert gchat.encode_thread_id(GChatThreadId("spaces/ABC123")) == "gchat:spaces/ABC123"

    def test_with_thread_name(self):
        thread_id = gchat.encode_thread_id(GChatThreadId("spaces/ABC123", "spaces/ABC123/threads/xyz"))
        assert thread_id.startswith("gchat:spaces/ABC123:")
        parts = thread_id.split(":")
        assert len(parts) == 3
        assert "/" not in parts[2]
        assert "=" not in parts[2]

    def test_dm_suffix(self):
        assert gchat.encode_thread_id(GChatThreadId("spaces/DM123", is_dm=True)) == "gchat:spaces/DM123:dm"

    def test_dm_suffix_with_thread_name(self):
        thread_id = gchat.encode_thread_id(GChatThreadId("spaces/DM123", "spaces/DM123/threads/t1", True))
        assert thread_id.endswith(":dm")
        assert len(thread_id.split(":")) == 4

    def test_empty_thread_name_omitted(self):
        assert gchat.encode_thread_id(GChatThreadId("spaces/A", "")) == "gchat:spaces/A"

    @pytest.mark.parametrize("space", ["", "spaces/A:B"])
    def test_invalid_space_rejected(self, space):
        with pytest.raises(ValidationError):
            gchat.encode_thread_id(GChatThreadId(space))

    def test_lone_surrogate_thread_name_rejected(self):
        with pytest.raises(ValidationError):
            gchat.encode_thread_id(GChatThreadId("spaces/A", "spaces/A/threads/\ud800"))


class TestGChatDecode:
    """Tests for gchat.decode_thread_id."""

    def test_space_only(self):
        assert gchat.decode_thread_id("gchat:spaces/ABC123") == GChatThreadId("spaces/ABC123", None, False)

    def test_dm(self):
        result = gchat.decode_thread_id("gchat:spaces/DM123:dm")
        assert result.space_name == "spaces/DM123"
        assert result.is_dm is True

    @pytest.mark.parametrize(
        "thread_id",
        [
            "invalid",
            "otherprefix:X:Y",
            "slack:C123:1234",
            "gchat:",
            "gchat:spaces/A:!!!",
            "gchat:spaces/A:abc:def",
            "gchat:spaces/A:",
        ],
    )
    def test_malformed_raises_decoding_error(self, thread_id):
        with pytest.raises(DecodingError) as exc_info:
            gchat.decode_thread_id(thread_id)
        assert "Invalid Google Chat thread ID" in str(exc_info.value)

    @pytest.mark.parametrize(
        "original",
        [
            GChatThreadId("spaces/ABC"),
            GChatThreadId("spaces/ABC", "spaces/ABC/threads/xyz"),
            GChatThreadId("spaces/DM1", is_dm=True),
            GChatThreadId("spaces/DM1", "spaces/DM1/threads/a:b/c", True),
            GChatThreadId("spaces/X", "v"),
            GChatThreadId("spaces/X", "ünïcode/threads/😀"),
        ],
    )
    def test_round_trip(self, original):
        assert gchat.decode_thread_id(gchat.encode_thread_id(original)) == original


class TestGChatIsDM:
    """Tests for gchat.is_dm_thread."""

    def test_dm(self):
        assert gchat.is_dm_thread("gchat:spaces/DM123:dm") is True

    def test_not_dm(self):
        assert gchat.is_dm_thread("gchat:spaces/ABC123") is False

    def test_dm_in_middle_is_not_marker(self):
        assert gchat.is_dm_thread("gchat:dm:spaces/ABC") is False

    @pytest.mark.parametrize("thread_id", ["", "dm", "gchat:dm", "slack:C1:dm", "gchat:spaces/A:!!!:dm"])
    def test_never_raises(self, thread_id):
        gchat.is_dm_thread(thread_id)

    def test_advisory_check_accepts_what_decode_rejects(self):
        assert gchat.is_dm_thread("gchat:spaces/A:!!!:dm") is True
        with pytest.raises(DecodingError):
            gchat.decode_thread_id("gchat:spaces/A:!!!:dm")


class TestTelegramThreadId:
    """Tests for telegram thread and message ids."""

    def test_encode(self):
        assert telegram.encode_thread_id(TelegramThreadId("123")) == "telegram:123"
        assert telegram.encode_thread_id(TelegramThreadId("-100123", 456)) == "telegram:-100123:456"

    def test_round_trip(self):
        original = TelegramThreadId("-100123", 7)
        assert telegram.decode_thread_id(telegram.encode_thread_id(original)) == original

    @pytest.mark.parametrize("thread_id", ["123", "discord:1", "telegram:", "telegram:1:x", "telegram:1:2:3"])
    def test_decode_rejects_malformed(self, thread_id):
        with pytest.raises(DecodingError):
            telegram.decode_thread_id(thread_id)

    def test_resolve_accepts_bare_chat_id(self):
        assert telegram.resolve_thread_id("42") == TelegramThreadId("42")
        assert telegram.channel_id_from_thread_id("telegram:-1:9") == "-1"

    def test_is_dm(self):
        assert telegram.is_dm_thread("telegram:123") is True
        assert telegram.is_dm_thread("telegram:-100123:4") is False
        assert telegram.is_dm_thread("nonsense") is False

    def test_message_ids(self):
        assert telegram.encode_message_id("-100", 5) == "-100:5"
        assert telegram.decode_message_id("-100:5") == ("-100", 5)
        assert telegram.decode_message_id("5", expected_chat_id="-100") == ("-100", 5)

    @pytest.mark.parametrize(
        ("message_id", "expected_chat_id"),
        [("-100:5", "-200"), ("5", None), ("abc", "-100")],
    )
    def test_message_id_errors(self, message_id, expected_chat_id):
        with pytest.raises(DecodingError):
            telegram.decode_message_id(message_id, expected_chat_id)


class TestWebexThreadId:
    """Tests for webex thread and channel ids."""

    def test_round_trip(self):
        original = WebexThreadId("Y2lzY29zcGFyazovL3VzL1JPT00vYWJj==", "msg/1")
        thread_id = webex.encode_thread_id(original)
        assert thread_id.startswith("webex:")
        assert len(thread_id.split(":")) == 3
        assert webex.decode_thread_id(thread_id) == original

    def test_channel_id(self):
        thread_id = webex.encode_thread_id(WebexThreadId("room-1", "root-1"))
        channel_id = webex.channel_id_from_thread_id(thread_id)
        assert channel_id == webex.encode_channel_id("room-1")
        assert webex.decode_channel_id(channel_id) == "room-1"

    @pytest.mark.parametrize("thread_id", ["webex:abc", "gchat:a:b", "webex:a:b:c", "webex:!!:cm9vdA"])
    def test_decode_rejects_malformed(self, thread_id):
        with pytest.raises(DecodingError):
            webex.decode_thread_id(thread_id)

    def test_encode_requires_both_parts(self):
        with pytest.raises(ValidationError):
            webex.encode_thread_id(WebexThreadId("room", ""))

    def test_lone_surrogate_rejected(self):
        with pytest.raises(ValidationError):
            webex.encode_thread_id(WebexThreadId("room-\ud800", "root"))

    def test_dm_room_prefix_is_dm(self):
        thread_id = webex.encode_thread_id(WebexThreadId("dm:person-123", "root-1"))
        assert thread_id == "webex:ZG06cGVyc29uLTEyMw:cm9vdC0x"
        assert webex.is_dm_thread(thread_id) is True

    def test_dm_thread_id(self):
        thread_id = webex.dm_thread_id("person-123")
        assert webex.decode_thread_id(thread_id) == WebexThreadId("dm:person-123", "root")
        assert WebexThreadCodec().is_dm(thread_id) is True

    def test_regular_room_is_not_dm(self):
        assert webex.is_dm_thread(webex.encode_thread_id(WebexThreadId("room-1", "root-1"))) is False

    @pytest.mark.parametrize("thread_id", ["", "webex", "webex:!!:x", "gchat:spaces/A:dm"])
    def test_is_dm_never_raises(self, thread_id):
        assert webex.is_dm_thread(thread_id) is False


@pytest.mark.parametrize("codec", [GChatThreadCodec(), TelegramThreadCodec(), WebexThreadCodec()])
def test_codecs_satisfy_protocol(codec) -> None:
    assert isinstance(codec, ThreadCodec)
