"""GrossUp: gross/net conversion for percentage-based deductions."""
