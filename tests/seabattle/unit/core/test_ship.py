import pytest

from seabattle.game.core.models import Coord, Orientation
from seabattle.game.core.ship import Ship


def test_hit_is_idempotent_and_ignores_foreign_cells(ship_factory) -> None:
    ship = ship_factory(0, 0)
    assert ship.hit(Coord(0, 1))
    assert ship.hit(Coord(0, 1))
    assert ship.hits == {Coord(0, 1)}
    assert not ship.hit(Coord(5, 5))
    assert ship.hits == {Coord(0, 1)}


def test_sunk_only_when_every_cell_hit(ship_factory) -> None:
    ship = ship_factory(2, 2, Orientation.VERTICAL)
    ship.hit(Coord(2, 2))
    ship.hit(Coord(3, 2))
    assert not ship.is_sunk()
    assert ship.unhit_locations() == [Coord(4, 2)]
    ship.hit(Coord(4, 2))
    assert ship.is_sunk()


def test_status_reports_progress(ship_factory) -> None:
    ship = ship_factory(0, 0)
    ship.hit(Coord(0, 0))
    status = ship.status()
    assert status["locations"] == ["00", "01", "02"]
    assert status["hits"] == ["00"]
    assert status["remaining_hits"] == 2
    assert status["is_sunk"] is False


@pytest.mark.parametrize(
    "locations",
    [
        (),
        (Coord(0, 0), Coord(0, 2)),
        (Coord(0, 0), Coord(1, 1)),
        (Coord(0, 0), Coord(0, 0)),
    ],
)
def test_ship_rejects_non_contiguous_layouts(locations) -> None:
    with pytest.raises(ValueError):
        Ship(locations=locations)


def test_ship_rejects_hits_outside_locations() -> None:
    with pytest.raises(ValueError):
        Ship(locations=(Coord(0, 0), Coord(0, 1)), hits={Coord(5, 5)})
