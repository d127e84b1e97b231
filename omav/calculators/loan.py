"""
Construction loan calculator — draw schedule during the build, amortized
permanent loan afterwards.

Draw strategies over a construction period of n months (T = n(n+1)/2):
- equal:    L / n every month
- frontend: L × (n − m + 1) / T in month m
- backend:  L × m / T in month m
- custom:   five buckets of ceil(n/5) months drawing 20/15/15/25/25% of L,
            the last month taking whatever is left
Interest on each draw month is the amount already drawn × annual rate / 12.
"""

import math

from .base import BaseCalculator, InvalidNumberError

DRAW_STRATEGIES = ("equal", "frontend", "backend", "custom")
LOAN_TYPES = ("construction-permanent", "construction-only")

CUSTOM_DISTRIBUTION = [0.2, 0.15, 0.15, 0.25, 0.25]

MAX_LOAN_TERM_YEARS = 50
MAX_CONSTRUCTION_MONTHS = 120
MAX_INTEREST_RATE = 100  # percent per year


def draw_amounts(loan_amount: float, months: int, strategy: str) -> list:
    """Monthly principal disbursements for the construction period."""
    if strategy == "equal":
        return [loan_amount / months] * months

    triangle = months * (months + 1) / 2
    if strategy == "frontend":
        return [loan_amount * (months - m + 1) / triangle for m in range(1, months + 1)]
    if strategy == "backend":
        return [loan_amount * m / triangle for m in range(1, months + 1)]

    months_per_bucket = math.ceil(months / len(CUSTOM_DISTRIBUTION))
    amounts = []
    bucket = 0
    remaining = loan_amount
    for month in range(1, months + 1):
        if month > bucket * months_per_bucket + months_per_bucket:
            bucket += 1
        share = CUSTOM_DISTRIBUTION[min(bucket, len(CUSTOM_DISTRIBUTION) - 1)]
        if month == months:
            amount = remaining
        else:
            amount = loan_amount * share / months_per_bucket
        amounts.append(amount)
        remaining -= amount
    return amounts


def monthly_payment(principal: float, monthly_rate: float, num_payments: int) -> float:
    """Level payment that retires `principal` in `num_payments` months."""
    growth = (1 + monthly_rate) ** num_payments
    # a rate too small to move the growth factor off 1.0 is a zero rate
    if monthly_rate == 0 or growth == 1:
        return principal / num_payments
    return principal * monthly_rate * growth / (growth - 1)


def amortization_schedule(principal: float, monthly_rate: float, num_payments: int,
                          payment: float) -> list:
    """Yearly principal/interest totals and closing balance."""
    schedule = []
    balance = principal
    year_principal = 0.0
    year_interest = 0.0
    for month in range(1, num_payments + 1):
        interest = balance * monthly_rate
        principal_paid = payment - interest
        year_principal += principal_paid
        year_interest += interest
        balance -= principal_paid
        if month % 12 == 0 or month == num_payments:
            schedule.append({
                "year": math.ceil(month / 12),
                "principal_paid": year_principal,
                "interest_paid": year_interest,
                "balance": balance,
            })
            year_principal = 0.0
            year_interest = 0.0
    return schedule


class LoanCalculator(BaseCalculator):

    key = "loan"
    title = "Construction Loan Calculator"

    def calculate(self, fields: dict) -> dict:
        project_cost = self.parse_number(fields.get("project_cost"), "project_cost", minimum=0)
        down_payment = self.parse_number(fields.get("down_payment"), "down_payment",
                                         default=0, minimum=0)
        loan_term = self.parse_int(fields.get("loan_term"), "loan_term", minimum=1,
                                   maximum=MAX_LOAN_TERM_YEARS)
        annual_rate = self.parse_number(fields.get("interest_rate"), "interest_rate",
                                        minimum=0, maximum=MAX_INTEREST_RATE) / 100
        construction_period = self.parse_int(fields.get("construction_period"),
                                             "construction_period", minimum=1,
                                             maximum=MAX_CONSTRUCTION_MONTHS)
        loan_type = self.parse_choice(fields.get("loan_type"), "loan_type", LOAN_TYPES,
                                      default="construction-permanent")
        strategy = self.parse_choice(fields.get("draw_schedule"), "draw_schedule",
                                     DRAW_STRATEGIES, default="equal")

        if down_payment > project_cost:
            raise InvalidNumberError("down_payment", "cannot exceed the project cost")
        loan_amount = project_cost - down_payment

        draws = []
        total_drawn = 0.0
        for month, amount in enumerate(draw_amounts(loan_amount, construction_period, strategy), 1):
            draws.append({
                "month": month,
                "amount": amount,
                "interest": total_drawn * annual_rate / 12,
            })
            total_drawn += amount

        construction_interest = sum(d["interest"] for d in draws)

        monthly_rate = annual_rate / 12
        num_payments = loan_term * 12
        payment = monthly_payment(loan_amount, monthly_rate, num_payments)
        total_paid = payment * num_payments
        schedule = amortization_schedule(loan_amount, monthly_rate, num_payments, payment)

        return {
            "loan_type": loan_type,
            "loan_amount": loan_amount,
            "construction_phase": {
                "monthly_interest_payment": construction_interest / construction_period,
                "total_interest_during_construction": construction_interest,
                "draw_schedule": [
                    {
                        "month": d["month"],
                        "amount": self.money(d["amount"]),
                        "interest": self.money(d["interest"]),
                    }
                    for d in draws
                ],
            },
            "permanent_phase": {
                "monthly_payment": self.money(payment),
                "total_interest_paid": self.money(total_paid - loan_amount),
                "total_amount_paid": self.money(total_paid),
                "amortization_schedule": [
                    {
                        "year": row["year"],
                        "principal_paid": self.money(row["principal_paid"]),
                        "interest_paid": self.money(row["interest_paid"]),
                        "balance": self.money(row["balance"]),
                    }
                    for row in schedule
                ],
            },
        }
