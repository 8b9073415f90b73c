"""College cutoff matching: eligibility, ranking, filtering, paging and fit tiers."""
