"""Unit tests for CompoundGrowthSimulator."""

from decimal import Decimal

import pytest

from finwise.domain.investing.services import CompoundGrowthSimulator
from finwise.domain.shared.exceptions import ErrorCode, InvalidParameterError


class TestSimulate:
    """Tests for the yearly compound growth simulation."""

    def test_single_year(self):
        result = CompoundGrowthSimulator.simulate(Decimal("1000"), Decimal("10"), 1)

        assert len(result) == 1
        assert result[0].year == 1
        assert result[0].amount == Decimal("1100.00")
        assert result[0].total_contributed == Decimal("1000.00")
        assert result[0].total_return == Decimal("100.00")

    def test_two_years_compound(self):
        result = CompoundGrowthSimulator.simulate(Decimal("1000"), Decimal("10"), 2)

        assert [r.amount for r in result] == [Decimal("1100.00"), Decimal("1210.00")]

    def test_contributions_are_added_before_growth(self):
        """Should add twelve contributions, then apply the yearly rate."""
        result = CompoundGrowthSimulator.simulate(
            Decimal("1000"),
            Decimal("10"),
            1,
            monthly_contribution=Decimal("100"),
        )

        assert result[0].amount == Decimal("2420.00")
        assert result[0].total_contributed == Decimal("2200.00")
        assert result[0].total_return == Decimal("220.00")

    def test_balance_is_carried_unrounded(self):
        """Rounding only applies to emitted figures."""
        result = CompoundGrowthSimulator.simulate(Decimal("1000"), Decimal("5.5"), 3)

        # 1055, 1113.025, 1174.241375
        assert [r.amount for r in result] == [
            Decimal("1055.00"),
            Decimal("1113.03"),
            Decimal("1174.24"),
        ]

    def test_zero_rate_returns_contributions(self):
        result = CompoundGrowthSimulator.simulate(
            Decimal("0"),
            Decimal("0"),
            2,
            monthly_contribution=Decimal("100"),
        )

        assert [r.amount for r in result] == [Decimal("1200.00"), Decimal("2400.00")]
        assert all(r.total_return == Decimal("0.00") for r in result)

    def test_length_matches_years(self):
        result = CompoundGrowthSimulator.simulate(Decimal("1"), Decimal("1"), 30)

        assert [r.year for r in result] == list(range(1, 31))

    @pytest.mark.parametrize("years", [0, -1])
    def test_years_must_be_positive(self, years):
        with pytest.raises(InvalidParameterError) as exc_info:
            CompoundGrowthSimulator.simulate(Decimal("1000"), Decimal("10"), years)

        assert exc_info.value.parameter == "years"
        assert exc_info.value.code == ErrorCode.INVALID_PARAMETER

    @pytest.mark.parametrize(
        ("principal", "rate", "monthly", "parameter"),
        [
            ("-1", "10", "0", "principal"),
            ("1000", "-0.5", "0", "annual_rate_percent"),
            ("1000", "10", "-100", "monthly_contribution"),
        ],
    )
    def test_negative_inputs_are_rejected(self, principal, rate, monthly, parameter):
        with pytest.raises(InvalidParameterError) as exc_info:
            CompoundGrowthSimulator.simulate(
                Decimal(principal),
                Decimal(rate),
                1,
                monthly_contribution=Decimal(monthly),
            )

        assert exc_info.value.parameter == parameter

    def test_large_balances_keep_every_digit(self):
        """Should round balances wider than the default decimal precision."""
        result = CompoundGrowthSimulator.simulate(1_000_000, 100, 100)

        assert len(result) == 100
        assert result[-1].amount == Decimal(1_000_000 * 2**100)
        assert result[-1].total_contributed == Decimal("1000000.00")
        assert result[-1].total_return == Decimal(1_000_000 * (2**100 - 1))

    def test_years_above_limit_are_rejected(self):
        with pytest.raises(InvalidParameterError, match="cannot exceed 100"):
            CompoundGrowthSimulator.simulate(Decimal("1000"), Decimal("10"), 101)

    def test_hundred_years_is_accepted(self):
        result = CompoundGrowthSimulator.simulate(Decimal("1000"), Decimal("10"), 100)

        assert result[-1].year == 100

    @pytest.mark.parametrize(
        ("principal", "rate", "monthly", "parameter"),
        [
            ("1e30", "10", "0", "principal"),
            ("1000", "1000.01", "0", "annual_rate_percent"),
            ("1000", "10", "1000000000000001", "monthly_contribution"),
        ],
    )
    def test_inputs_above_bounds_are_rejected(
        self,
        principal,
        rate,
        monthly,
        parameter,
    ):
        with pytest.raises(InvalidParameterError) as exc_info:
            CompoundGrowthSimulator.simulate(
                Decimal(principal),
                Decimal(rate),
                1,
                monthly_contribution=Decimal(monthly),
            )

        assert exc_info.value.parameter == parameter

    def test_repeated_calls_are_identical(self):
        first = CompoundGrowthSimulator.simulate(
            Decimal("2500"),
            Decimal("7.25"),
            10,
            monthly_contribution=Decimal("150"),
        )
        second = CompoundGrowthSimulator.simulate(
            Decimal("2500"),
            Decimal("7.25"),
            10,
            monthly_contribution=Decimal("150"),
        )

        assert first == second


class TestProjectAccumulation:
    """Tests for the monthly accumulation projection."""

    def test_monthly_rate_is_equivalent_to_annual(self):
        """Twelve monthly steps should reproduce the annual rate."""
        projection = CompoundGrowthSimulator.project_accumulation(
            initial=Decimal("1000"),
            monthly_contribution=Decimal("0"),
            annual_rate_percent=Decimal("12"),
            years=Decimal("1"),
        )

        assert projection.months == 12
        assert projection.final_nominal == Decimal("1120.00")
        assert projection.final_real == Decimal("1120.00")
        assert projection.nominal_return == Decimal("120.00")

    def test_zero_rate_accumulates_contributions(self):
        projection = CompoundGrowthSimulator.project_accumulation(
            initial=Decimal("0"),
            monthly_contribution=Decimal("100"),
            annual_rate_percent=Decimal("0"),
            years=Decimal("1"),
        )

        assert projection.total_invested == Decimal("1200.00")
        assert projection.final_nominal == Decimal("1200.00")
        assert projection.nominal_return == Decimal("0.00")
        assert [p.month for p in projection.points] == list(range(1, 13))
        assert projection.points[0].nominal == Decimal("100.00")

    def test_inflation_equal_to_rate_keeps_real_value_flat(self):
        projection = CompoundGrowthSimulator.project_accumulation(
            initial=Decimal("1000"),
            monthly_contribution=Decimal("0"),
            annual_rate_percent=Decimal("10"),
            years=Decimal("1"),
            inflation_percent=Decimal("10"),
        )

        assert projection.final_nominal == Decimal("1100.00")
        assert projection.final_real == Decimal("1000.00")
        assert projection.real_return == Decimal("0.00")

    @pytest.mark.parametrize(
        ("years", "months"),
        [(Decimal("0.5"), 6), (Decimal("2"), 24), (Decimal("0.01"), 1)],
    )
    def test_fractional_years_round_to_months(self, years, months):
        projection = CompoundGrowthSimulator.project_accumulation(
            initial=Decimal("100"),
            monthly_contribution=Decimal("10"),
            annual_rate_percent=Decimal("6"),
            years=years,
        )

        assert projection.months == months
        assert len(projection.points) == months

    def test_years_must_be_positive(self):
        with pytest.raises(InvalidParameterError, match="must be positive"):
            CompoundGrowthSimulator.project_accumulation(
                Decimal("100"),
                Decimal("10"),
                Decimal("6"),
                Decimal("0"),
            )

    def test_negative_inflation_is_rejected(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            CompoundGrowthSimulator.project_accumulation(
                Decimal("100"),
                Decimal("10"),
                Decimal("6"),
                Decimal("1"),
                inflation_percent=Decimal("-1"),
            )

        assert exc_info.value.parameter == "inflation_percent"

    def test_years_above_limit_are_rejected(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            CompoundGrowthSimulator.project_accumulation(
                Decimal("100"),
                Decimal("10"),
                Decimal("6"),
                Decimal("100.5"),
            )

        assert exc_info.value.parameter == "years"

    def test_high_rate_over_long_horizon(self):
        """Should emit finite figures at the edge of the accepted range."""
        projection = CompoundGrowthSimulator.project_accumulation(
            initial=Decimal("1000000000000000"),
            monthly_contribution=Decimal("1000000000000000"),
            annual_rate_percent=Decimal("1000"),
            years=Decimal("100"),
            inflation_percent=Decimal("0"),
        )

        assert projection.months == 1200
        assert projection.final_nominal.is_finite()
        assert projection.final_nominal > projection.total_invested
        assert projection.final_nominal == projection.final_real

    def test_repeated_calls_are_identical(self):
        kwargs = {
            "initial": Decimal("1000"),
            "monthly_contribution": Decimal("200"),
            "annual_rate_percent": Decimal("9"),
            "years": Decimal("3.5"),
            "inflation_percent": Decimal("4"),
        }

        assert CompoundGrowthSimulator.project_accumulation(
            **kwargs,
        ) == CompoundGrowthSimulator.project_accumulation(**kwargs)
