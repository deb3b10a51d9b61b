from django.core.exceptions import ValidationError
from django.test import TestCase

from friendships.models import User
from friendships.services import default_resolver
from friendships.tests.helpers import make_friendship, make_user


class UserModelTestCase(TestCase):
    def setUp(self):
        default_resolver.cache.clear()
        self.user = User.objects.create_user(
            'johndoe',
            first_name='John',
            last_name='Doe',
            email='johndoe@example.org',
            password='Password123',
        )

    def _assert_user_is_valid(self):
        try:
            self.user.full_clean()
        except (ValidationError):
            self.fail('Test user should be valid')

    def _assert_user_is_invalid(self):
        with self.assertRaises(ValidationError):
            self.user.full_clean()

    def test_valid_user(self):
        self._assert_user_is_valid()

    def test_username_can_be_30_characters_long(self):
        self.user.username = 'x' * 30
        self._assert_user_is_valid()

    def test_username_cannot_be_over_30_characters_long(self):
        self.user.username = 'x' * 31
        self._assert_user_is_invalid()

    def test_username_needs_three_word_characters(self):
        self.user.username = 'ab'
        self._assert_user_is_invalid()

    def test_username_rejects_punctuation(self):
        self.user.username = 'john.doe'
        self._assert_user_is_invalid()

    def test_email_must_not_be_blank(self):
        self.user.email = ''
        self._assert_user_is_invalid()

    def test_full_name(self):
        self.assertEqual(self.user.full_name(), 'John Doe')

    def test_current_friends_uses_active_edges(self):
        friend = make_user(username='janedoe')
        pending = make_user(username='petra')
        make_friendship(self.user, friend, approved=True)
        make_friendship(self.user, pending)

        self.assertEqual(self.user.current_friends(), [friend])
