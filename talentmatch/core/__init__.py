"""
Core business logic modules for TalentMatch.

Submodules:
- matching: Candidate-job scoring, ranking, result selection and statistics
- exceptions: Errors raised on invalid input
"""
