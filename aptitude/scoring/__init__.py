"""
scoring/ - Aptitude Scoring Engine

Modules:
    utils.py                - zero-division-safe statistics
    question_scorer.py      - Question Scorer (all-or-nothing and partial credit)
    category_scorer.py      - Category Aggregator (two-pass weighted contributions)
    overall_scorer.py       - Overall Scorer (weight-weighted mean)
    integration_service.py  - Full pipeline orchestration and input validation
"""
