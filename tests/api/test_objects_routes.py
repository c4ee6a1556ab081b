"""Object routes — each endpoint wraps one object utility."""


async def test_copy(client):
    res = await client.post("/api/v1/objects/copy", json={"obj": {"a": 2, "b": {"a": [1, 2, 3]}}})
    assert res.status_code == 200
    assert res.json() == {"result": {"a": 2, "b": {"a": [1, 2, 3]}}}


async def test_merge(client):
    res = await client.post(
        "/api/v1/objects/merge", json={"objects": [{"a": 1, "b": 2}, {"b": 3, "c": 5}]},
    )
    assert res.json() == {"result": {"a": 1, "b": 5, "c": 5}}


async def test_remove(client):
    res = await client.post(
        "/api/v1/objects/remove", json={"obj": {"a": 1, "b": 2, "c": 3}, "keys": ["b", "c"]},
    )
    assert res.json() == {"result": {"a": 1}}


async def test_remove_single_key(client):
    res = await client.post(
        "/api/v1/objects/remove",
        json={"obj": {"name": "John", "age": 30}, "keys": "age"},
    )
    assert res.json() == {"result": {"name": "John"}}


async def test_compare(client):
    res = await client.post(
        "/api/v1/objects/compare", json={"first": {"a": 1, "b": 2}, "second": {"a": 1, "b": 3}},
    )
    assert res.json() == {"equal": False}


async def test_is_empty(client):
    res = await client.post("/api/v1/objects/is-empty", json={"obj": {}})
    assert res.json() == {"empty": True}


async def test_freeze_ignores_writes_and_deletes(client):
    res = await client.post(
        "/api/v1/objects/freeze",
        json={"obj": {"a": 1, "b": 2}, "writes": {"a": 5, "newProp": "new"}, "deletes": ["a"]},
    )
    assert res.status_code == 200
    assert res.json() == {"frozen": {"a": 1, "b": 2}, "unchanged": True}


async def test_merge_rejects_non_object_items(client):
    res = await client.post("/api/v1/objects/merge", json={"objects": [1, 2]})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_merge_unaddable_values_is_400(client):
    res = await client.post("/api/v1/objects/merge", json={"objects": [{"a": 1}, {"a": "x"}]})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MERGE_VALUE_ERROR"
