"""HTTP surface for the ATS scoring engine."""
