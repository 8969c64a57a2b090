from dataclasses import replace

from millpath.mill import Cutter, Driller, Isolator, Mill, RoutingMill


def test_isolator_keeps_given_values():
    isolator = Isolator(feed=12.5, extra_passes=3, voronoi=True,
                        tool_diameters_and_overlap_widths=[(0.01, 0.002)])
    assert isolator.feed == 12.5
    assert isolator.extra_passes == 3
    assert isolator.voronoi is True
    assert isolator.tool_diameters_and_overlap_widths == [(0.01, 0.002)]


def test_tool_lists_are_not_shared():
    first = Isolator()
    second = Isolator()
    first.tool_diameters_and_overlap_widths.append((0.1, 0.01))
    assert second.tool_diameters_and_overlap_widths == []


def test_cutter_carries_routing_settings():
    cutter = Cutter(optimise=0.5, tool_diameter=0.125, bridges_num=4)
    assert isinstance(cutter, RoutingMill)
    assert cutter.optimise == 0.5
    assert cutter.bridges_num == 4


def test_replace_changes_only_one_field():
    driller = Driller(zsafe=1.0, zwork=-0.1, pre_milling_gcode="G90")
    changed = replace(driller, zwork=-0.2)
    assert changed.zwork == -0.2
    assert changed.zsafe == driller.zsafe
    assert changed.pre_milling_gcode == "G90"
    assert changed != driller


def test_equal_settings_compare_equal():
    assert Mill(feed=3.0, speed=1000) == Mill(feed=3.0, speed=1000)
    assert RoutingMill(offset=0.1) != RoutingMill(offset=0.2)