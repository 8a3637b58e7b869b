from charview.client.models import CharacterRecord, PageResult
from charview.client.state import (
    LoadPhase,
    build_initial_view_state,
    with_filter,
    with_load_failed,
    with_loading,
    with_page_loaded,
)


def _character(character_id: int, status: str) -> CharacterRecord:
    return CharacterRecord(
        id=character_id,
        name=f"Character {character_id}",
        status=status,
        species="Alien",
        gender="Female",
        location_name="Citadel of Ricks",
        image_url=f"https://img.test/{character_id}.jpeg",
    )


def test_build_initial_view_state_sets_defaults() -> None:
    state = build_initial_view_state()

    assert state.current_page == 1
    assert state.total_pages == 1
    assert state.all_characters == ()
    assert state.filtered_characters == ()
    assert state.selected_status == ""
    assert state.phase is LoadPhase.IDLE
    assert state.error_message is None


def test_with_page_loaded_keeps_selected_status_and_recomputes_filter() -> None:
    state = with_filter(build_initial_view_state(), "Dead")
    result = PageResult(items=(_character(1, "Alive"), _character(2, "Dead")), total_pages=7)

    loaded = with_page_loaded(with_loading(state), 4, result)

    assert loaded.current_page == 4
    assert loaded.total_pages == 7
    assert loaded.selected_status == "Dead"
    assert [item.id for item in loaded.all_characters] == [1, 2]
    assert [item.id for item in loaded.filtered_characters] == [2]
    assert loaded.phase is LoadPhase.LOADED


def test_with_filter_resets_page_and_uses_current_characters() -> None:
    result = PageResult(items=(_character(1, "Alive"), _character(2, "unknown")), total_pages=5)
    loaded = with_page_loaded(build_initial_view_state(), 3, result)

    filtered = with_filter(loaded, "UNKNOWN")

    assert filtered.current_page == 1
    assert filtered.total_pages == 5
    assert [item.id for item in filtered.filtered_characters] == [2]
    assert filtered.all_characters == loaded.all_characters

    cleared = with_filter(filtered, None)

    assert cleared.selected_status == ""
    assert cleared.filtered_characters == cleared.all_characters


def test_with_load_failed_keeps_page_data() -> None:
    result = PageResult(items=(_character(1, "Alive"),), total_pages=2)
    loaded = with_page_loaded(build_initial_view_state(), 2, result)

    failed = with_load_failed(with_loading(loaded), "boom")

    assert failed.phase is LoadPhase.ERROR
    assert failed.error_message == "boom"
    assert failed.current_page == 2
    assert failed.all_characters == loaded.all_characters
    assert failed.filtered_characters == loaded.filtered_characters


def test_navigation_flags_follow_page_boundaries() -> None:
    result = PageResult(items=(), total_pages=3)

    first = with_page_loaded(build_initial_view_state(), 1, result)
    middle = with_page_loaded(first, 2, result)
    last = with_page_loaded(middle, 3, result)

    assert (first.has_previous, first.has_next) == (False, True)
    assert (middle.has_previous, middle.has_next) == (True, True)
    assert (last.has_previous, last.has_next) == (True, False)
