import copy

import pytest

from confstr_kit.handles import api
from confstr_kit.handles.handle import ConfStrHandle
from confstr_kit.handles.iterator import PairIterator
from confstr_kit.handles.resource import HandleReleasedError
from confstr_kit.parsers.errors import ParseError

SOURCE = "http::host=localhost;port=9000;"


@pytest.fixture
def handle() -> ConfStrHandle:
    return api.parse(SOURCE)


@pytest.fixture
def empty_handle() -> ConfStrHandle:
    return api.parse("http")


class TestBoundaryOperations:
    def test_service_and_get(self, handle: ConfStrHandle) -> None:
        assert api.service(handle) == "http"
        assert api.get(handle, "host") == "localhost"
        assert api.get(handle, "port") == "9000"

    def test_get_absent_key_returns_none(self, empty_handle: ConfStrHandle) -> None:
        assert api.get(empty_handle, "host") is None

    def test_parse_error_is_raised(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            api.parse("http;port=9000")

        assert exc_info.value.message == (
            "bad separator, expected ':' got ';' at position 4"
        )
        assert exc_info.value.position == 4

    def test_parse_strict(self) -> None:
        with pytest.raises(ParseError, match="must be alphanumeric"):
            api.parse("http::ho st=x;", strict=True)

    def test_iteration_yields_pairs_in_order(self, handle: ConfStrHandle) -> None:
        it = api.begin_iteration(handle)
        seen = []
        while api.advance(it):
            seen.append((it.key, it.value))

        assert seen == [("host", "localhost"), ("port", "9000")]
        assert it.exhausted

    def test_release(self, handle: ConfStrHandle) -> None:
        api.release(handle)

        assert handle.released


class TestHandleOwnership:
    def test_double_release_raises(self, handle: ConfStrHandle) -> None:
        handle.release()

        with pytest.raises(HandleReleasedError, match="already released"):
            handle.release()

    def test_use_after_release_raises(self, handle: ConfStrHandle) -> None:
        handle.release()

        with pytest.raises(HandleReleasedError, match="used after release"):
            handle.service()
        with pytest.raises(HandleReleasedError):
            handle.get("host")
        with pytest.raises(HandleReleasedError):
            handle.iterate()

    def test_context_manager_releases_on_exit(self) -> None:
        with api.parse(SOURCE) as handle:
            assert handle.service() == "http"

        assert handle.released

    def test_context_manager_releases_on_exception(self) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            with api.parse(SOURCE) as handle:
                raise RuntimeError("boom")

        assert handle.released

    def test_explicit_release_inside_block_is_allowed(self) -> None:
        with api.parse(SOURCE) as handle:
            handle.release()

        assert handle.released

    def test_cannot_enter_released_handle(self, handle: ConfStrHandle) -> None:
        handle.release()

        with pytest.raises(HandleReleasedError):
            with handle:
                pass

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_handle_cannot_be_copied(self, handle: ConfStrHandle, copier) -> None:
        with pytest.raises(TypeError, match="cannot be copied"):
            copier(handle)

    def test_repr_hides_values(self, handle: ConfStrHandle) -> None:
        assert "localhost" not in repr(handle)
        handle.release()
        assert repr(handle) == "ConfStrHandle(<released>)"


class TestPairIterator:
    def test_created_state_has_no_current_pair(self, handle: ConfStrHandle) -> None:
        it = handle.iterate()

        assert not it.exhausted
        assert it.current is None
        assert it.key is None
        assert it.value is None

    def test_advance_moves_through_pairs(self, handle: ConfStrHandle) -> None:
        it = handle.iterate()

        assert it.advance() is True
        assert (it.key, it.value) == ("host", "localhost")
        assert it.advance() is True
        assert (it.key, it.value) == ("port", "9000")
        assert it.advance() is False
        assert it.exhausted
        assert it.key is None
        assert it.value is None

    def test_exhausted_is_terminal(self, handle: ConfStrHandle) -> None:
        it = handle.iterate()
        while it.advance():
            pass

        assert it.advance() is False
        assert it.advance() is False
        assert it.exhausted

    def test_empty_pair_set_starts_exhausted(self, empty_handle: ConfStrHandle) -> None:
        it = empty_handle.iterate()

        assert it.exhausted
        assert it.advance() is False

    def test_python_iterator_protocol(self, handle: ConfStrHandle) -> None:
        assert list(handle.iterate()) == [("host", "localhost"), ("port", "9000")]

    def test_iterators_are_independent(self, handle: ConfStrHandle) -> None:
        first = handle.iterate()
        second = handle.iterate()

        first.advance()
        first.advance()

        assert second.key is None
        assert list(second) == [("host", "localhost"), ("port", "9000")]
        assert first.key == "port"

    def test_equality(self, handle: ConfStrHandle) -> None:
        first = handle.iterate()
        second = handle.iterate()
        assert first == second

        first.advance()
        assert first != second

        second.advance()
        assert first == second

    def test_exhausted_iterators_are_equal(
        self, handle: ConfStrHandle, empty_handle: ConfStrHandle
    ) -> None:
        it = handle.iterate()
        list(it)

        assert it == empty_handle.iterate()

    def test_iterators_of_different_handles_differ(
        self, handle: ConfStrHandle
    ) -> None:
        other = api.parse(SOURCE)

        assert handle.iterate() != other.iterate()

    def test_release_iterator_keeps_handle(self, handle: ConfStrHandle) -> None:
        it = handle.iterate()
        it.release()

        assert handle.service() == "http"
        with pytest.raises(HandleReleasedError):
            it.advance()

    def test_release_handle_invalidates_iterators(
        self, handle: ConfStrHandle
    ) -> None:
        it = handle.iterate()
        it.advance()
        handle.release()

        with pytest.raises(HandleReleasedError):
            it.advance()
        with pytest.raises(HandleReleasedError):
            _ = it.key

    def test_iterator_double_release_raises(self, handle: ConfStrHandle) -> None:
        it = handle.iterate()
        api.release(it)

        with pytest.raises(HandleReleasedError):
            api.release(it)

    def test_iterator_context_manager(self, handle: ConfStrHandle) -> None:
        with handle.iterate() as it:
            assert isinstance(it, PairIterator)
            it.advance()

        assert it.released
        assert not handle.released

    def test_iterator_is_unhashable(self, handle: ConfStrHandle) -> None:
        with pytest.raises(TypeError):
            hash(handle.iterate())
