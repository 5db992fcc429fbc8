from decimal import Decimal

from flipcalc.engine.debt import monthly_payment, monthly_rate, remaining_balance
from flipcalc.engine.rental import (
    HOLD_PERIOD_YEARS,
    appreciated_value,
    evaluate_rental_projection,
    monthly_rent,
)


class TestRentBasis:
    def test_entered_rent(self, canonical_deal_with_rent):
        assert monthly_rent(canonical_deal_with_rent) == Decimal("2400")

    def test_estimated_rent(self, canonical_deal):
        # 320000 x 0.8%
        assert monthly_rent(canonical_deal) == Decimal("2560")
        projection = evaluate_rental_projection(canonical_deal)
        assert projection.rent_is_estimated is True


class TestYearlyProjection:
    def test_five_years(self, canonical_deal_with_rent):
        projection = evaluate_rental_projection(canonical_deal_with_rent)
        assert [y.year for y in projection.years] == list(range(1, HOLD_PERIOD_YEARS + 1))

    def test_appreciation(self, canonical_deal_with_rent):
        projection = evaluate_rental_projection(canonical_deal_with_rent)
        assert projection.years[0].appreciated_value == Decimal("329600")
        assert projection.years[4].appreciated_value == appreciated_value(Decimal("320000"), 5)

    def test_rent_growth(self, canonical_deal_with_rent):
        projection = evaluate_rental_projection(canonical_deal_with_rent)
        assert projection.years[0].adjusted_monthly_rent == Decimal("2400")
        assert projection.years[2].adjusted_monthly_rent == Decimal("2496.96")

    def test_first_year_expenses(self, canonical_deal_with_rent):
        year = evaluate_rental_projection(canonical_deal_with_rent).years[0]
        assert year.rental_income == Decimal("28800")
        assert year.vacancy_loss == Decimal("2304")
        assert year.property_management == Decimal("2880")
        assert year.maintenance == Decimal("1440")
        # Taxes and insurance on ARV
        assert year.property_taxes == Decimal("4800")
        assert year.insurance == Decimal("1600")
        mortgage = monthly_payment(Decimal("160000"), Decimal("7.5"), 30) * 12
        assert year.annual_mortgage == mortgage
        assert abs(year.cash_flow - Decimal("2351.08")) < Decimal("0.01")

    def test_balance_recomputed_from_scratch(self, canonical_deal_with_rent):
        projection = evaluate_rental_projection(canonical_deal_with_rent)
        r = monthly_rate(Decimal("7.5"))
        for year in projection.years:
            assert year.remaining_loan_balance == remaining_balance(
                Decimal("160000"), r, 360, year.year * 12
            )

    def test_balance_ignores_flip_loan_term(self, canonical_deal_with_rent):
        from dataclasses import replace

        short_term = replace(canonical_deal_with_rent, loan_term_years=15)
        assert (
            evaluate_rental_projection(short_term).final_loan_balance
            == evaluate_rental_projection(canonical_deal_with_rent).final_loan_balance
        )

    def test_equity(self, canonical_deal_with_rent):
        for year in evaluate_rental_projection(canonical_deal_with_rent).years:
            assert year.equity == year.appreciated_value - year.remaining_loan_balance
            assert year.principal_paydown == Decimal("160000") - year.remaining_loan_balance
            assert year.equity_gain == year.appreciated_value - Decimal("320000")


class TestTotals:
    def test_sale_at_end_of_hold(self, canonical_deal_with_rent):
        projection = evaluate_rental_projection(canonical_deal_with_rent)
        final = projection.years[-1]
        assert projection.selling_cost_after_holding == final.appreciated_value * Decimal("0.07")
        assert projection.net_proceeds_from_sale == (
            final.appreciated_value - final.remaining_loan_balance - projection.selling_cost_after_holding
        )

    def test_profit_and_roi(self, canonical_deal_with_rent):
        projection = evaluate_rental_projection(canonical_deal_with_rent)
        assert projection.initial_investment == Decimal("80000")
        total_cash_flow = sum(y.cash_flow for y in projection.years)
        assert projection.total_rental_cash_flow == total_cash_flow
        assert projection.total_rental_profit == (
            total_cash_flow + projection.net_proceeds_from_sale - Decimal("80000")
        )
        assert projection.rental_roi == projection.total_rental_profit / Decimal("80000") * 100
        assert projection.annualized_rental_roi == projection.rental_roi / 5

    def test_irr_positive(self, canonical_deal_with_rent):
        projection = evaluate_rental_projection(canonical_deal_with_rent)
        assert projection.rental_irr is not None
        assert Decimal("0") < projection.rental_irr < Decimal("1")

    def test_all_cash_rental_has_no_mortgage(self, all_cash_deal):
        projection = evaluate_rental_projection(all_cash_deal)
        assert projection.monthly_mortgage_payment == Decimal("0")
        assert projection.final_loan_balance == Decimal("0")

    def test_real_appreciation_is_net_of_inflation(self, canonical_deal):
        projection = evaluate_rental_projection(canonical_deal)
        assert projection.real_appreciation_rate == Decimal("0.01")
