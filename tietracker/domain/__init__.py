"""Domain layer for tietracker.

Pure models and rules with no I/O:

    shared   - Result monad and base domain event
    project  - clients, rates, projects and the validation policy
    settings - VAT, currency and locale preferences
    summary  - tracked tasks, periods and summary aggregation
"""
