def test_subject_with_parent(client):
    parent = client.post('/subjects', json={'SubjectName': 'Calculo I'}).json()
    assert parent == {'id': 1, 'SubjectName': 'Calculo I', 'ParentSubjectID': None}

    r = client.post('/subjects', json={'SubjectName': 'Calculo II', 'ParentSubjectID': parent['id']})
    assert r.status_code == 200
    assert r.json() == {'id': 2, 'SubjectName': 'Calculo II', 'ParentSubjectID': 1}


def test_subject_with_missing_parent_fails(client):
    r = client.post('/subjects', json={'SubjectName': 'Calculo II', 'ParentSubjectID': 99})
    assert r.status_code == 400
    assert r.json() == {'error': 'saving failed'}


def test_update_only_touches_sent_fields(client):
    client.post('/subjects', json={'SubjectName': 'Fisica I'})
    client.post('/subjects', json={'SubjectName': 'Fisica II', 'ParentSubjectID': 1})

    r = client.put('/subjects/2', json={'SubjectName': 'Fisica II (L)'})
    assert r.json() == {'id': 2, 'SubjectName': 'Fisica II (L)', 'ParentSubjectID': 1}

    r = client.put('/subjects/2', json={'ParentSubjectID': None})
    assert r.json() == {'id': 2, 'SubjectName': 'Fisica II (L)', 'ParentSubjectID': None}

    r = client.put('/subjects/2', json={'ParentSubjectID': 50})
    assert r.status_code == 400
    assert r.json() == {'error': 'update failed'}


def test_deleting_parent_detaches_children(client):
    client.post('/subjects', json={'SubjectName': 'Programacion I'})
    client.post('/subjects', json={'SubjectName': 'Programacion II', 'ParentSubjectID': 1})

    assert client.delete('/subjects/1').json() == {'result': 'ok deleted 1'}
    assert client.get('/subjects/2').json()['ParentSubjectID'] is None


def test_parent_id_outside_bigint_range_is_rejected(client):
    r = client.post('/subjects', json={'SubjectName': 'Algebra', 'ParentSubjectID': 2**70})
    assert r.status_code == 400
    assert r.json() == {'error': 'Subject binding failed'}

    client.post('/subjects', json={'SubjectName': 'Algebra'})
    r = client.put('/subjects/1', json={'ParentSubjectID': -(2**70)})
    assert r.status_code == 400
    assert r.json() == {'error': 'Subject binding failed'}
    assert client.get('/subjects/1').json()['ParentSubjectID'] is None
