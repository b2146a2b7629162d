from property_engine import EditBuffer, OrderingStore, diff_category, switch_category
from schema import CategoryTag


def edited_basic_buffer() -> EditBuffer:
    buffer = EditBuffer.fresh("Basic")
    buffer.set("Name", "Ryzen 7 7700")
    buffer.set("Manufacturer", "AMD")
    buffer.set("Rating", "4.5")
    return buffer


def test_switch_to_same_category_is_a_no_op():
    buffer = EditBuffer.fresh("CPU")
    buffer.set("Cores", "8")
    result = diff_category(buffer, "CPU")

    assert result.buffer == buffer
    assert result.added == []
    assert result.removed == []


def test_round_trip_keeps_base_edits_and_drops_category_only_edits():
    start = edited_basic_buffer()

    on_cpu = diff_category(start, "CPU").buffer
    assert on_cpu.category is CategoryTag.CPU
    assert on_cpu.values["Name"] == "Ryzen 7 7700"
    assert on_cpu.values["Cores"] == "0"
    on_cpu.set("Cores", "8")

    back = diff_category(on_cpu, "Basic").buffer
    assert back.values == start.values
    assert "Cores" not in back.values

    # CPU-only edits do not come back: they were dropped, not hidden
    again = diff_category(back, "CPU").buffer
    assert again.values["Cores"] == "0"


def test_fields_shared_by_name_survive_a_switch():
    buffer = EditBuffer.fresh("CPU")
    buffer.set("Max Frequency", "5.00 GHz")
    buffer.set("Cores", "8")

    result = diff_category(buffer, "GPU")

    assert result.buffer.values["Max Frequency"] == "5.00 GHz"
    assert "Cores" in result.removed
    assert "Shading Units" in result.added
    assert "Max Frequency" not in result.added
    assert "Cores" not in result.buffer.values


def test_result_order_follows_new_category():
    result = diff_category(edited_basic_buffer(), "RAM")
    assert list(result.buffer.values)[6:8] == ["Capacity", "Memory Type"]


def test_diff_does_not_touch_the_input():
    buffer = edited_basic_buffer()
    before = dict(buffer.values)
    diff_category(buffer, "CPU")
    assert buffer.values == before
    assert buffer.category is CategoryTag.BASIC


def test_unknown_category_diffs_to_basic():
    result = diff_category(EditBuffer.fresh("CPU"), "Nonexistent")
    assert result.buffer.category is CategoryTag.BASIC
    assert "Cores" in result.removed


def test_switch_category_merges_ordering_in_lockstep():
    ordering = OrderingStore.for_category("Basic")
    buffer = EditBuffer.fresh("Basic")

    result = switch_category(buffer, "CPU", ordering)
    assert "Cores" in ordering
    assert ordering.is_visible("Cores")

    ordering.set_visibility("Cores", False)
    back = switch_category(result.buffer, "Basic", ordering)
    again = switch_category(back.buffer, "CPU", ordering)

    # entry kept while out of scope, so the hidden choice comes back
    assert "Cores" in again.added
    assert ordering.is_visible("Cores") is False
