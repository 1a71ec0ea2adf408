from datetime import datetime, timedelta

from fastapi.testclient import TestClient
import pytest


def _book(client: TestClient, *, screening_id: int, seats: list[str], username: str) -> str:
    arrangement = client.post(
        '/api/arrangement/screening', json={'screening_id': screening_id}
    ).json()
    selected_time = arrangement['available_slots'][0]
    client.post('/api/arrangement/time', json={'selected_time': selected_time})
    client.post('/api/arrangement/attendees', json={'attendees': len(seats)})
    for seat in seats:
        client.post('/api/arrangement/seat', json={'seat': seat})
    response = client.post('/api/arrangement/confirm', json={'username': username})
    assert response.status_code == 201, response.text
    return selected_time


class TestCatalogApi:
    def test_health(self, client: TestClient):
        assert client.get('/health').json()['status'] == 'healthy'

    def test_only_active_screenings_are_listed(self, client: TestClient):
        response = client.get('/api/catalog/screenings')

        assert response.status_code == 200
        body = response.json()
        assert body['page'] == 1
        assert body['max_page'] == 1
        assert [s['id'] for s in body['screenings']] == [1, 2]

    def test_screenings_filtered_by_genre(self, client: TestClient):
        response = client.get('/api/catalog/screenings', params={'genre': 'Family'})

        assert [s['movie']['title'] for s in response.json()['screenings']] == ['Paddington 2']

    def test_genre_without_screenings_gives_an_empty_page(self, client: TestClient):
        response = client.get('/api/catalog/screenings', params={'genre': 'Horror'})

        assert response.status_code == 200
        assert response.json()['screenings'] == []
        assert response.json()['max_page'] == 1

    def test_page_out_of_range(self, client: TestClient):
        assert client.get('/api/catalog/screenings', params={'page': 2}).status_code == 400

    def test_genres(self, client: TestClient):
        assert client.get('/api/catalog/genres').json() == ['Sci-Fi', 'Family']

    def test_unknown_screening_is_not_found(self, client: TestClient):
        assert client.get('/api/catalog/screenings/3').status_code == 404

    def test_slots_are_within_two_weeks(self, client: TestClient, live_now: datetime):
        response = client.get('/api/catalog/screenings/1/slots')

        slots = response.json()
        assert 13 <= len(slots) <= 14
        last = datetime.fromisoformat(slots[-1]['time'].replace('Z', '+00:00'))
        assert last <= live_now + timedelta(days=14, minutes=1)
        assert slots[0]['label'].endswith('12:00PM')


class TestArrangementApi:
    def test_initial_state(self, client: TestClient):
        assert client.get('/api/arrangement').json()['state'] == 'undecided'

    def test_choose_time_before_screening_is_rejected(self, client: TestClient, live_now):
        response = client.post(
            '/api/arrangement/time', json={'selected_time': live_now.isoformat()}
        )

        assert response.status_code == 409

    @pytest.mark.parametrize('attendees', ['2', 0, 2.5])
    def test_attendees_must_be_a_positive_integer(self, client: TestClient, attendees):
        arrangement = client.post('/api/arrangement/screening', json={'screening_id': 1}).json()
        client.post(
            '/api/arrangement/time', json={'selected_time': arrangement['available_slots'][0]}
        )

        response = client.post('/api/arrangement/attendees', json={'attendees': attendees})

        assert response.status_code == 400
        assert client.get('/api/arrangement').json()['state'] == 'decide_attendees'

    def test_bad_username_is_rejected(self, client: TestClient):
        arrangement = client.post('/api/arrangement/screening', json={'screening_id': 2}).json()
        client.post(
            '/api/arrangement/time', json={'selected_time': arrangement['available_slots'][0]}
        )
        client.post('/api/arrangement/attendees', json={'attendees': 1})

        response = client.post('/api/arrangement/username', json={'username': 'x'})

        assert response.status_code == 400


class TestTicketApi:
    def test_booked_seat_cannot_be_picked_again(self, client: TestClient):
        selected_time = _book(client, screening_id=2, seats=['A1', 'A2'], username='first_user')
        client.post('/api/arrangement/screening', json={'screening_id': 2})
        client.post('/api/arrangement/time', json={'selected_time': selected_time})
        client.post('/api/arrangement/attendees', json={'attendees': 1})

        response = client.post('/api/arrangement/seat', json={'seat': 'A2'})

        assert response.status_code == 409

    def test_list_and_delete_tickets(self, client: TestClient):
        selected_time = _book(client, screening_id=1, seats=['A1', 'A2'], username='carol')

        by_time = client.get('/api/ticket/screening/1', params={'selected': selected_time})
        assert sorted(t['seat'] for t in by_time.json()) == ['A1', 'A2']

        response = client.post(
            '/api/ticket/delete',
            json={'screening_id': 1, 'selected': selected_time, 'seat': 'A1'},
        )
        assert response.status_code == 200
        assert [t['seat'] for t in client.get('/api/ticket/user/carol').json()] == ['A2']

        response = client.post(
            '/api/ticket/delete_batch',
            json={'tickets': [{'screening_id': 1, 'selected': selected_time, 'seat': 'A2'}]},
        )
        assert response.json() == {'deleted': 1}
        assert client.get('/api/ticket/user/carol').json() == []

    def test_delete_missing_ticket_is_not_found(self, client: TestClient):
        selected_time = _book(client, screening_id=1, seats=['B1'], username='dave')

        response = client.post(
            '/api/ticket/delete',
            json={'screening_id': 1, 'selected': selected_time, 'seat': 'B2'},
        )

        assert response.status_code == 404
