import json

from venear import events


def _compact(value):
    return json.dumps(value, separators=(",", ":"))


def test_optional_nonce_serializes_as_string():
    data = events.lockup_update_data("a.near", 1, None, 123456789, None)
    assert _compact({"value": data["lockup_update_nonce"]}) == '{"value":"123456789"}'


def test_optional_values_serialize_as_null():
    data = events.lockup_update_data("a.near", 1, None, None, None)
    assert _compact({"value": data["lockup_update_nonce"]}) == '{"value":null}'
    assert _compact({"value": data["locked_near_balance"]}) == '{"value":null}'


def test_optional_near_token_serializes_as_string():
    data = events.lockup_update_data("a.near", 1, None, None, 987654321)
    assert _compact({"value": data["locked_near_balance"]}) == '{"value":"987654321"}'


def test_full_struct_serialization():
    data = events.lockup_update_data(
        "test.near", 1, 123456789, 42, 1000000000000000000000000
    )
    assert _compact(data) == (
        '{"account_id":"test.near","lockup_version":1,"timestamp":"123456789",'
        '"lockup_update_nonce":"42","locked_near_balance":"1000000000000000000000000"}'
    )


def test_full_struct_serialization_with_none():
    data = events.lockup_update_data("test.near", 1, None, None, None)
    assert _compact(data) == (
        '{"account_id":"test.near","lockup_version":1,"timestamp":null,'
        '"lockup_update_nonce":null,"locked_near_balance":null}'
    )


def test_event_log_format():
    logs = []
    events.lockup_action(
        logs.append, "test_event", "event_test.near", 1, 777, 987654321, 5555555555555555555
    )
    assert logs == [
        'EVENT_JSON:{"standard":"venear","version":"1.0.0","event":"test_event",'
        '"data":[{"account_id":"event_test.near","lockup_version":1,"timestamp":"987654321",'
        '"lockup_update_nonce":"777","locked_near_balance":"5555555555555555555"}]}'
    ]


def test_format_event_wraps_data_in_list():
    line = events.format_event("venear", "x", {"k": 1})
    assert line.startswith("EVENT_JSON:")
    parsed = json.loads(line[len("EVENT_JSON:"):])
    assert parsed == {"standard": "venear", "version": "1.0.0", "event": "x", "data": [{"k": 1}]}


def test_proposal_vote_action():
    logs = []
    events.proposal_vote_action(logs.append, "proposal_vote", "alice.near", 3, 1, 500)
    parsed = json.loads(logs[0][len("EVENT_JSON:"):])
    assert parsed["event"] == "proposal_vote"
    assert parsed["data"] == [
        {"account_id": "alice.near", "proposal_id": 3, "vote": 1, "account_balance": "500"}
    ]


def test_approve_proposal_action():
    logs = []
    events.approve_proposal_action(logs.append, "proposal_approve", "rev.near", 7, None)
    parsed = json.loads(logs[0][len("EVENT_JSON:"):])
    assert parsed["data"] == [
        {"account_id": "rev.near", "proposal_id": 7, "voting_start_time_sec": None}
    ]


def test_create_proposal_action():
    logs = []
    events.create_proposal_action(logs.append, "create_proposal", "bob.near", 0)
    parsed = json.loads(logs[0][len("EVENT_JSON:"):])
    assert parsed["standard"] == "venear"
    assert parsed["data"] == [{"proposer_id": "bob.near", "proposal_id": 0}]


def test_ft_mint_and_burn():
    logs = []
    events.ft_mint(logs.append, "alice.near", 5)
    events.ft_burn(logs.append, "alice.near", 5)
    assert logs[0] == (
        'EVENT_JSON:{"standard":"nep141","version":"1.0.0","event":"ft_mint",'
        '"data":[{"owner_id":"alice.near","amount":"5","memo":null}]}'
    )
    assert logs[1] == logs[0].replace("ft_mint", "ft_burn")