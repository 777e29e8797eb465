"""Unit tests for anonymous identity."""

from aptitude_arena.identity import STORAGE_KEY_IDENTITY, AnonymousIdentityProvider, SessionContext


class TestSessionContext:
    """Tests for SessionContext."""

    def test_signed_out_by_default(self):
        assert SessionContext().is_signed_in is False

    def test_signed_in(self):
        assert SessionContext(user_id="abc").is_signed_in is True

    def test_empty_id_is_signed_out(self):
        assert SessionContext(user_id="").is_signed_in is False


class TestAnonymousIdentityProvider:
    """Tests for AnonymousIdentityProvider."""

    def test_sign_in_creates_id(self, cache):
        context = AnonymousIdentityProvider(cache).sign_in()
        assert context.is_signed_in
        assert cache.read_json(STORAGE_KEY_IDENTITY) == {"userId": context.user_id}

    def test_sign_in_is_stable(self, cache):
        first = AnonymousIdentityProvider(cache).sign_in()
        second = AnonymousIdentityProvider(cache).sign_in()
        assert first == second

    def test_sign_out_forgets_id(self, cache):
        provider = AnonymousIdentityProvider(cache)
        first = provider.sign_in()

        assert provider.sign_out() == SessionContext()
        assert provider.sign_in() != first

    def test_malformed_stored_identity_is_replaced(self, cache):
        cache.write_json(STORAGE_KEY_IDENTITY, {"userId": 17})
        context = AnonymousIdentityProvider(cache).sign_in()
        assert isinstance(context.user_id, str)
        assert cache.read_json(STORAGE_KEY_IDENTITY) == {"userId": context.user_id}
