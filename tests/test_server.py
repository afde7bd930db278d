"""Tests for the kanadrill REST API."""

import random
import unittest

from fastapi.testclient import TestClient

import server.app as app_module
from core.config import WRONG_WEIGHT_FACTOR


class TestDrillAPI(unittest.TestCase):
    """Tests for the session and weight endpoints."""

    def setUp(self):
        app_module.sessions.clear()
        app_module.user_sessions.clear()
        app_module.user_selectors.clear()
        app_module.rng = random.Random(3)
        app_module.keep_weights = True
        self.client = TestClient(app_module.app)

    def tearDown(self):
        app_module.sessions.clear()
        app_module.user_sessions.clear()
        app_module.user_selectors.clear()
        app_module.keep_weights = True

    def start(self, groups=None, user_id='tester'):
        response = self.client.post('/api/sessions', json={
            'user_id': user_id,
            'groups': [0] if groups is None else groups
        })
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()

    def game(self, session_id):
        return app_module.sessions[session_id]['game']

    def wrong_option(self, session_id):
        current = self.game(session_id).current_round
        return next(o for o in current.options if not current.is_correct(o))

    def test_health_check(self):
        response = self.client.get('/')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['service'], 'kanadrill')

    def test_list_groups(self):
        response = self.client.get('/api/groups')
        groups = response.json()['groups']
        self.assertEqual(groups[0]['name'], 'Hiragana あ')

    def test_start_session(self):
        data = self.start()
        self.assertEqual(data['user_id'], 'tester')
        self.assertEqual(data['groups'], [0])
        self.assertEqual(data['group_names'], ['Hiragana あ'])
        self.assertEqual(data['mode'], 'forward')
        self.assertEqual(data['consecutive_correct'], 0)
        self.assertEqual(len(data['round']['options']), 3)
        self.assertIn(data['round']['prompt'], 'あいうえお')
        self.assertEqual(data['stats']['score'], 0)

    def test_start_session_without_groups(self):
        response = self.client.post('/api/sessions', json={'user_id': 'tester', 'groups': []})
        self.assertEqual(response.status_code, 400)

    def test_start_session_unknown_group(self):
        response = self.client.post('/api/sessions', json={'user_id': 'tester', 'groups': [999]})
        self.assertEqual(response.status_code, 400)

    def test_get_session(self):
        data = self.start()
        response = self.client.get(f"/api/sessions/{data['session_id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['round'], data['round'])

    def test_unknown_session(self):
        self.assertEqual(self.client.get('/api/sessions/nope').status_code, 404)
        response = self.client.post('/api/sessions/nope/answer', json={'choice': 'a'})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.client.delete('/api/sessions/nope').status_code, 404)

    def test_correct_answer(self):
        data = self.start()
        session_id = data['session_id']
        answer = self.game(session_id).current_round.answer
        response = self.client.post(f'/api/sessions/{session_id}/answer', json={
            'choice': answer,
            'answer_ms': 1500
        })
        self.assertEqual(response.status_code, 200)
        result = response.json()
        self.assertTrue(result['correct'])
        self.assertEqual(result['score'], 1)
        self.assertEqual(result['feedback'], f"{data['round']['prompt']} = {answer}")
        stats = self.game(session_id).stats
        self.assertEqual(stats.correct_answer_times, [1.5])

    def test_wrong_answer(self):
        data = self.start()
        session_id = data['session_id']
        choice = self.wrong_option(session_id)
        result = self.client.post(f'/api/sessions/{session_id}/answer',
                                  json={'choice': choice}).json()
        self.assertFalse(result['correct'])
        self.assertEqual(result['score'], 0)
        self.assertEqual(result['round']['prompt'], data['round']['prompt'])
        self.assertEqual(result['round']['wrong_selected'], [choice])

        weights = self.client.get('/api/users/tester/weights').json()['weights']
        self.assertAlmostEqual(weights[data['round']['key']]['weight'], WRONG_WEIGHT_FACTOR)

    def test_invalid_choice(self):
        session_id = self.start()['session_id']
        response = self.client.post(f'/api/sessions/{session_id}/answer', json={'choice': 'zz'})
        self.assertEqual(response.status_code, 400)

    def test_negative_answer_time_rejected(self):
        session_id = self.start()['session_id']
        answer = self.game(session_id).current_round.answer
        response = self.client.post(f'/api/sessions/{session_id}/answer', json={
            'choice': answer,
            'answer_ms': -5
        })
        self.assertEqual(response.status_code, 422)
        self.assertEqual(self.game(session_id).stats.correct_answer_times, [])

    def test_end_session(self):
        session_id = self.start()['session_id']
        response = self.client.delete(f'/api/sessions/{session_id}')
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()['success'])
        self.assertEqual(self.client.get(f'/api/sessions/{session_id}').status_code, 404)
        self.assertNotIn('tester', app_module.user_sessions)
        # Weights outlive the session
        self.assertIn('tester', app_module.user_selectors)

    def test_new_session_replaces_previous_for_same_user(self):
        first = self.start()
        second = self.start()
        self.assertEqual(len(app_module.sessions), 1)
        self.assertEqual(app_module.user_sessions, {'tester': second['session_id']})
        self.assertEqual(self.client.get(f"/api/sessions/{first['session_id']}").status_code, 404)
        self.assertEqual(self.client.get(f"/api/sessions/{second['session_id']}").status_code, 200)

    def test_sessions_of_different_users_coexist(self):
        alice = self.start(user_id='alice')
        bob = self.start(user_id='bob')
        self.assertEqual(len(app_module.sessions), 2)
        self.assertEqual(app_module.user_sessions, {'alice': alice['session_id'],
                                                    'bob': bob['session_id']})

    def test_weights_persist_across_sessions(self):
        first = self.start()
        first_selector = self.game(first['session_id']).selector
        self.client.post(f"/api/sessions/{first['session_id']}/answer",
                         json={'choice': self.wrong_option(first['session_id'])})
        second = self.start()
        self.assertIs(self.game(second['session_id']).selector, first_selector)

    def test_weights_dropped_when_not_kept(self):
        app_module.keep_weights = False
        first = self.start()
        self.client.post(f"/api/sessions/{first['session_id']}/answer",
                         json={'choice': self.wrong_option(first['session_id'])})
        self.start()
        weights = self.client.get('/api/users/tester/weights').json()['weights']
        self.assertTrue(all(info['weight'] == 1.0 for info in weights.values()))

    def test_weights_for_unknown_user(self):
        response = self.client.get('/api/users/ghost/weights')
        self.assertEqual(response.json(), {'user_id': 'ghost', 'weights': {}})

    def test_reset_weights(self):
        data = self.start()
        self.client.post(f"/api/sessions/{data['session_id']}/answer",
                         json={'choice': self.wrong_option(data['session_id'])})
        response = self.client.post('/api/users/tester/weights/reset')
        self.assertTrue(response.json()['success'])
        weights = self.client.get('/api/users/tester/weights').json()['weights']
        self.assertEqual(weights, {})

    def test_users_have_separate_weights(self):
        data = self.start(user_id='alice')
        self.client.post(f"/api/sessions/{data['session_id']}/answer",
                         json={'choice': self.wrong_option(data['session_id'])})
        self.start(user_id='bob')
        bob = self.client.get('/api/users/bob/weights').json()['weights']
        self.assertTrue(all(info['weight'] == 1.0 for info in bob.values()))


if __name__ == '__main__':
    unittest.main()
