from rest_framework import status
from rest_framework.test import APITestCase

from users.tests.factories import make_user


class LeaderboardTests(APITestCase):
    url = '/api/v1/user/leaderboard'

    def test_empty(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"success": True, "leaderboard": []})

    def test_only_spenders_sorted_descending(self):
        for i, spent in enumerate([0, 50, 10, 0, 200]):
            make_user(email=f"user{i}@example.com", username=f"user{i}", money_spent=spent)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        leaderboard = response.data['leaderboard']
        self.assertEqual([entry['moneySpent'] for entry in leaderboard], [200, 50, 10])
        self.assertEqual([entry['userName'] for entry in leaderboard], ['user4', 'user1', 'user2'])
        for entry in leaderboard:
            self.assertNotIn('password', entry)

    def test_ties_keep_insertion_order(self):
        make_user(email='first@example.com', username='first', money_spent=75)
        make_user(email='second@example.com', username='second', money_spent=75)

        response = self.client.get(self.url)

        self.assertEqual([entry['userName'] for entry in response.data['leaderboard']], ['first', 'second'])
