import time
import uuid

import pytest

from regokit import uuids
from regokit.utils import BuiltinError, Undefined

NODE = 0x020000000001
CLOCK_SEQ = 0x1234


def make_v1(node=NODE):
    return uuid.uuid1(node=node, clock_seq=CLOCK_SEQ)


def test_v1_fields():
    result = uuids.parse([str(make_v1())])
    assert result["version"] == 1
    assert result["variant"] == "RFC4122"
    assert result["nodeid"] == "02-00-00-00-00-01"
    assert result["macvariables"] == "local:unicast"
    assert result["clocksequence"] == CLOCK_SEQ
    assert "domain" not in result


def test_v1_time_matches_clock():
    before = time.time_ns()
    u = make_v1()
    after = time.time_ns()
    stamp = uuids.parse([str(u)])["time"]
    assert before - 1000 <= stamp <= after + 1000


def test_multicast_node():
    result = uuids.parse([str(make_v1(node=0x010000000000))])
    assert result["macvariables"] == "global:multicast"


def test_v2_fields():
    raw = bytearray(make_v1().bytes)
    raw[6] = (raw[6] & 0x0F) | 0x20
    raw[9] = 1
    text = str(uuid.UUID(bytes=bytes(raw)))
    result = uuids.parse([text])
    assert result["version"] == 2
    assert result["domain"] == "Group"
    assert result["id"] == int.from_bytes(raw[0:4], "big")
    assert "time" in result


def test_nil_uuid():
    result = uuids.parse([str(uuid.UUID(int=0))])
    assert result == {"version": 0, "variant": "NCS"}


def test_alternative_forms_agree():
    text = str(make_v1())
    plain = uuids.parse([text])
    assert uuids.parse(["{" + text + "}"]) == plain
    assert uuids.parse(["urn:uuid:" + text]) == plain
    assert uuids.parse([text.replace("-", "")]) == plain
    assert uuids.parse([text.upper()]) == plain


def test_invalid_is_undefined():
    assert uuids.parse(["not-a-uuid"]) is Undefined()
    text = uuid.uuid4().hex
    misplaced = text[:7] + "-" + text[7:11] + "-" + text[11:15] + "-" + text[15:19] + "-" + text[19:]
    assert uuids.parse([misplaced]) is Undefined()


def test_rfc4122_generates_v4():
    text = uuids.rfc4122(["seed"])
    result = uuids.parse([text])
    assert result["version"] == 4
    assert result["variant"] == "RFC4122"
    assert "time" not in result
    assert uuids.rfc4122(["seed"]) != text


def test_argument_errors():
    with pytest.raises(BuiltinError, match="expects string argument"):
        uuids.rfc4122([1])
    with pytest.raises(BuiltinError, match="expects 1 argument"):
        uuids.parse([])


def test_register():
    table = {}
    uuids.register(table)
    fn, nargs = table["uuid.parse"]
    assert nargs == 1
    assert fn(["nope"]) is Undefined()