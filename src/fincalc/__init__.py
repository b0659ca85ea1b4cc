"""FinCalc: loan, investment and amortization calculations."""
