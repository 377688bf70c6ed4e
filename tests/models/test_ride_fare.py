"""Tests for ride fare computation in RideFare."""

import pytest

from ridefare.models.ride import (
    Ride, StandardRide, PremiumRide, RideType, InvalidDistanceError, create_ride
)


@pytest.fixture
def standard_ride():
    """Fixture for a standard ride from the demo."""
    return StandardRide(1, "University", "City Center", 4.3)


@pytest.fixture
def premium_ride():
    """Fixture for a premium ride from the demo."""
    return PremiumRide(2, "International Airport", "Hotel District", 12.0)


class TestRideFare:
    """Test class for fare formulas."""

    @pytest.mark.parametrize("distance", [0.0, 1.0, 4.3, 3.1, 25.75])
    def test_standard_fare_formula(self, distance):
        """Standard fare is a 1.5 base plus 1.8 per mile."""
        ride = StandardRide(1, "A", "B", distance)
        assert ride.compute_fare() == pytest.approx(1.5 + 1.8 * distance)

    @pytest.mark.parametrize("distance", [0.0, 1.0, 12.0, 40.2])
    def test_premium_fare_formula(self, distance):
        """Premium fare is a 4.0 base, 3.2 per mile and a 1.5 luxury fee."""
        ride = PremiumRide(1, "A", "B", distance)
        assert ride.compute_fare() == pytest.approx(5.5 + 3.2 * distance)

    def test_demo_fares(self, standard_ride, premium_ride):
        """Test the fares of the demo rides."""
        assert standard_ride.compute_fare() == pytest.approx(9.24)
        assert premium_ride.compute_fare() == pytest.approx(43.9)
        assert StandardRide(3, "Tech Park", "Student Housing", 3.1).compute_fare() == pytest.approx(7.08)

    def test_fare_total_zero_until_computed(self, standard_ride):
        """Test that a new ride has no fare yet."""
        assert standard_ride.fare_total == 0.0

    def test_compute_fare_stores_fare_total(self, premium_ride):
        """Test that the computed fare is stored on the ride."""
        fare = premium_ride.compute_fare()
        assert premium_ride.fare_total == fare

    def test_compute_fare_is_idempotent(self, standard_ride):
        """Test that recomputing with the same distance changes nothing."""
        first = standard_ride.compute_fare()
        second = standard_ride.compute_fare()
        assert first == second
        assert standard_ride.fare_total == first

    def test_recompute_after_distance_change(self, standard_ride):
        """Test that a recomputation overwrites the previous fare."""
        standard_ride.compute_fare()
        standard_ride.distance_miles = 10.0
        assert standard_ride.compute_fare() == pytest.approx(19.5)
        assert standard_ride.fare_total == pytest.approx(19.5)

    def test_negative_distance_rejected(self):
        """Test that a negative distance raises InvalidDistanceError."""
        with pytest.raises(InvalidDistanceError) as excinfo:
            StandardRide(1, "A", "B", -0.5)
        assert "non-negative" in str(excinfo.value)

    def test_invalid_distance_is_value_error(self):
        """Test that InvalidDistanceError can be caught as ValueError."""
        with pytest.raises(ValueError):
            PremiumRide(1, "A", "B", -3)

    @pytest.mark.parametrize("distance", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_distance_rejected(self, distance):
        """Test that NaN and infinite distances raise InvalidDistanceError."""
        with pytest.raises(InvalidDistanceError):
            StandardRide(1, "A", "B", distance)

    def test_fare_total_not_a_constructor_argument(self):
        """Test that a fare cannot be set before compute_fare() runs."""
        with pytest.raises(TypeError):
            StandardRide(1, "A", "B", 2.0, 99.0)
        with pytest.raises(TypeError):
            PremiumRide(1, "A", "B", 2.0, fare_total=99.0)

    def test_ride_is_abstract(self):
        """Test that the base ride cannot be instantiated."""
        with pytest.raises(TypeError):
            Ride(1, "A", "B", 1.0)


class TestRideDetails:
    """Test class for ride detail lines."""

    def test_standard_details(self, standard_ride):
        """Test the details line of a priced standard ride."""
        standard_ride.compute_fare()
        assert standard_ride.details() == (
            "[Standard] Ride ID: 1 | From: University | To: City Center"
            " | Distance: 4.3 miles | Fare: $9.24"
        )

    def test_premium_details(self, premium_ride):
        """Test that whole-number distances print without decimals."""
        premium_ride.compute_fare()
        assert premium_ride.details() == (
            "[Premium] Ride ID: 2 | From: International Airport | To: Hotel District"
            " | Distance: 12 miles | Fare: $43.9"
        )

    def test_details_before_compute_show_zero_fare(self, standard_ride):
        """Test that details before pricing show a zero fare."""
        assert standard_ride.details().endswith("| Fare: $0")

    def test_print_details(self, standard_ride, capsys):
        """Test that print_details writes the details line."""
        standard_ride.compute_fare()
        standard_ride.print_details()
        captured = capsys.readouterr()
        assert captured.out == standard_ride.details() + "\n"


class TestCreateRide:
    """Test class for the ride factory."""

    def test_create_from_enum(self):
        ride = create_ride(RideType.PREMIUM, 7, "A", "B", 2.0)
        assert isinstance(ride, PremiumRide)
        assert ride.id == 7
        assert ride.variant == "Premium"

    def test_create_from_value(self):
        ride = create_ride("standard", 8, "A", "B", 2.0)
        assert isinstance(ride, StandardRide)
        assert ride.variant == "Standard"

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            create_ride("luxury", 9, "A", "B", 2.0)

    def test_rides_compare_by_identity(self):
        """Test that two rides with the same data are still distinct rides."""
        first = create_ride("standard", 1, "A", "B", 2.0)
        second = create_ride("standard", 1, "A", "B", 2.0)
        assert first != second
        assert first == first
