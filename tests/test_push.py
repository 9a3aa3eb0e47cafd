import pytest

from timrest.client import Client, Options
from timrest.errors import IMError
from timrest.push import PushAPI, PushCondition, PushMessage
from timrest.types import MsgTextContent

OK = {"ActionStatus": "OK", "ErrorCode": 0, "ErrorInfo": ""}


class FakeTransport:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def __call__(self, method, url, payload):
        self.calls.append((method, url, payload))
        return self.responses.pop(0) if self.responses else dict(OK)


def make_api(*responses):
    transport = FakeTransport(*responses)
    client = Client(Options(app_id=1400000000, app_secret="secret", user_id="admin"), transport)
    return PushAPI(client), transport


def text_message():
    message = PushMessage(sender="alice")
    message.add_content(MsgTextContent(text="hello"))
    return message


def test_condition_set_replaces_and_add_accumulates():
    message = PushMessage()
    message.add_condition_tags_or("a", "b")
    message.add_condition_tags_or("c")
    assert message.condition.tags_or == ["a", "b", "c"]
    message.set_condition_tags_or("d")
    assert message.condition.tags_or == ["d"]
    message.set_condition_tags_and("x")
    message.add_condition_tags_and("y")
    assert message.condition.tags_and == ["x", "y"]


def test_condition_attrs_set_and_add():
    message = PushMessage()
    message.add_condition_attrs_or({"sex": "m"})
    message.add_condition_attrs_or({"age": 3})
    assert message.condition.attrs_or == {"sex": "m", "age": 3}
    message.set_condition_attrs_or({"city": "x"})
    assert message.condition.attrs_or == {"city": "x"}
    message.set_condition_attrs_and({"k": 1})
    assert message.condition.attrs_and == {"k": 1}


def test_condition_payload_keeps_unset_as_null():
    cond = PushCondition(tags_or=["t"])
    assert cond.to_payload() == {"TagsAnd": None, "TagsOr": ["t"], "AttrsAnd": None, "AttrsOr": None}


def test_validate_rejects_tags_and_attrs_together():
    message = text_message()
    message.add_condition_tags_and("t")
    message.add_condition_attrs_and({"a": 1})
    with pytest.raises(ValueError, match="cannot be set at the same time"):
        message.validate()


def test_validate_rejects_empty_body():
    with pytest.raises(ValueError, match="content is not set"):
        PushMessage().validate()


def test_push_message_sends_condition_and_returns_task_id():
    api, transport = make_api(dict(OK, TaskId="task-1"))
    message = text_message()
    message.add_condition_tags_or("vip")
    assert api.push_message(message) == "task-1"
    method, url, payload = transport.calls[0]
    assert method == "POST"
    assert "/v4/all_member_push/im_push?" in url
    assert payload["From_Account"] == "alice"
    assert payload["Condition"]["TagsOr"] == ["vip"]
    assert payload["MsgBody"] == [{"MsgType": "TIMTextElem", "MsgContent": {"Text": "hello"}}]
    assert payload["MsgRandom"] == message.random


def test_push_message_without_condition_omits_it():
    api, transport = make_api(dict(OK, TaskId="t"))
    api.push_message(text_message())
    payload = transport.calls[0][2]
    assert "Condition" not in payload
    assert "MsgLifeTime" not in payload


def test_push_message_service_failure_raises():
    api, _ = make_api({"ActionStatus": "FAIL", "ErrorCode": 90001, "ErrorInfo": "bad"})
    with pytest.raises(IMError) as info:
        api.push_message(text_message())
    assert info.value.code == 90001


def test_set_attr_names_stringifies_keys():
    api, transport = make_api()
    api.set_attr_names({0: "sex", 1: "city"})
    assert transport.calls[0][2] == {"AttrNames": {"0": "sex", "1": "city"}}


@pytest.mark.parametrize("names", [{}, {i: f"n{i}" for i in range(11)}])
def test_set_attr_names_limits(names):
    api, transport = make_api()
    with pytest.raises(IMError) as info:
        api.set_attr_names(names)
    assert info.value.code == -1
    assert transport.calls == []


def test_get_attr_names_parses_keys():
    api, _ = make_api(dict(OK, AttrNames={"0": "sex", "2": "city"}))
    assert api.get_attr_names() == {0: "sex", 2: "city"}


def test_get_user_attrs_maps_by_user():
    response = dict(OK, Attrs=[{"To_Account": "u1", "Attrs": {"sex": "m"}}])
    api, transport = make_api(response)
    assert api.get_user_attrs("u1") == {"u1": {"sex": "m"}}
    assert transport.calls[0][2] == {"To_Account": ["u1"]}


def test_get_user_attrs_limit():
    api, _ = make_api()
    with pytest.raises(IMError, match="cannot exceed 100"):
        api.get_user_attrs(*[f"u{i}" for i in range(101)])


def test_set_and_delete_user_attrs_payloads():
    api, transport = make_api()
    api.set_user_attrs({"u1": {"sex": "f"}})
    api.delete_user_attrs({"u1": ["sex"]})
    assert transport.calls[0][2] == {"Attrs": [{"To_Account": "u1", "Attrs": {"sex": "f"}}]}
    assert transport.calls[1][2] == {"Attrs": [{"To_Account": "u1", "Attrs": ["sex"]}]}
    assert "im_remove_attr" in transport.calls[1][1]


def test_get_user_tags_empty_and_filled():
    api, _ = make_api(dict(OK), dict(OK, Tags=[{"To_Account": "u1", "Tags": ["a", "b"]}]))
    assert api.get_user_tags("u1") == {}
    assert api.get_user_tags("u1") == {"u1": ["a", "b"]}


def test_add_and_delete_user_tags_payloads():
    api, transport = make_api()
    api.add_user_tags({"u1": ["a"]})
    api.delete_user_tags({"u1": ["a"]})
    assert transport.calls[0][2] == {"Tags": [{"To_Account": "u1", "Tags": ["a"]}]}
    assert "im_add_tag" in transport.calls[0][1]
    assert "im_remove_tag" in transport.calls[1][1]


def test_tag_calls_reject_empty_input():
    api, _ = make_api()
    with pytest.raises(IMError, match="not set"):
        api.add_user_tags({})
    with pytest.raises(IMError, match="not set"):
        api.delete_user_all_tags()


def test_delete_user_all_tags_payload():
    api, transport = make_api()
    api.delete_user_all_tags("u1", "u2")
    assert transport.calls[0][2] == {"To_Account": ["u1", "u2"]}
    assert "im_remove_all_tags" in transport.calls[0][1]