from fastapi.testclient import TestClient
from app.main import app, parse_group_id

client = TestClient(app)


def _create(name, members):
    r = client.post('/api/groups', json={'groupName': name, 'members': members})
    assert r.status_code == 200
    return r.json()


def test_empty_lists_on_fresh_store():
    assert client.get('/api/groups').json() == []
    assert client.get('/api/students').json() == []


def test_create_group_returns_summary():
    body = _create('G', ['A', 'B'])
    assert body == {'id': 0, 'groupName': 'G', 'members': [0, 1]}


def test_get_group_returns_full_students_in_order():
    created = _create('G', ['A', 'B'])
    r = client.get(f"/api/groups/{created['id']}")
    assert r.status_code == 200
    group = r.json()
    assert group['groupName'] == 'G'
    assert [m['name'] for m in group['members']] == ['A', 'B']
    assert [m['id'] for m in group['members']] == created['members']


def test_list_groups_returns_summaries_in_order():
    g1 = _create('G1', ['A'])
    g2 = _create('G2', ['B', 'C'])
    assert client.get('/api/groups').json() == [g1, g2]


def test_list_students_across_groups():
    _create('G1', ['A', 'B'])
    _create('G2', ['C'])
    r = client.get('/api/students')
    assert r.status_code == 200
    assert r.json() == [
        {'id': 0, 'name': 'A'},
        {'id': 1, 'name': 'B'},
        {'id': 2, 'name': 'C'},
    ]


def test_empty_first_member_is_400_plain_text():
    r = client.post('/api/groups', json={'groupName': 'X', 'members': ['']})
    assert r.status_code == 400
    assert r.text == 'Groups must contain members'
    assert r.headers['content-type'].startswith('text/plain')
    assert client.get('/api/groups').json() == []


def test_empty_members_array_creates_empty_group():
    body = _create('X', [])
    assert body['members'] == []


def test_missing_group_name_is_stored_as_null():
    r = client.post('/api/groups', json={'members': ['A']})
    assert r.status_code == 200
    assert r.json()['groupName'] is None


def test_get_missing_group_is_404():
    r = client.get('/api/groups/999')
    assert r.status_code == 404
    assert r.text == 'Group not found with ID: 999'


def test_non_numeric_id_is_404_nan():
    r = client.get('/api/groups/abc')
    assert r.status_code == 404
    assert r.text == 'Group not found with ID: NaN'


def test_numeric_prefix_id_matches_group():
    created = _create('G', ['A'])
    r = client.get(f"/api/groups/{created['id']}xyz")
    assert r.status_code == 200
    assert r.json()['id'] == created['id']


def test_delete_group_is_204_and_removes_it():
    g1 = _create('G1', ['A'])
    g2 = _create('G2', ['B'])
    r = client.delete(f"/api/groups/{g1['id']}")
    assert r.status_code == 204
    assert r.content == b''
    assert client.get('/api/groups').json() == [g2]
    assert client.get(f"/api/groups/{g1['id']}").status_code == 404
    assert [s['name'] for s in client.get('/api/students').json()] == ['B']


def test_delete_missing_group_is_404():
    r = client.delete('/api/groups/5')
    assert r.status_code == 404
    assert r.text == 'Group not found with ID: 5'


def test_deleted_ids_not_reused():
    first = _create('G1', ['A', 'B'])
    client.delete(f"/api/groups/{first['id']}")
    second = _create('G2', ['C'])
    assert second['id'] == first['id'] + 1
    assert second['members'] == [2]


def test_parse_group_id():
    assert parse_group_id('12') == 12
    assert parse_group_id('12abc') == 12
    assert parse_group_id('1.5') == 1
    assert parse_group_id(' -3') == -3
    assert parse_group_id('abc') is None
    assert parse_group_id('') is None
    assert parse_group_id('0x1f') == 31
    assert parse_group_id('0X1') == 1
    assert parse_group_id('-0x2') == -2
    assert parse_group_id('0x') is None
    assert parse_group_id('0xzz') is None


def test_hex_prefixed_id_selects_matching_group():
    _create('G0', ['A'])
    g1 = _create('G1', ['B'])
    r = client.get('/api/groups/0x1')
    assert r.status_code == 200
    assert r.json()['id'] == g1['id']


def test_non_string_values_stored_as_given():
    r = client.post('/api/groups', json={'groupName': 7, 'members': ['A', None]})
    assert r.status_code == 200
    body = r.json()
    assert body['groupName'] == 7
    group = client.get(f"/api/groups/{body['id']}").json()
    assert [m['name'] for m in group['members']] == ['A', None]
