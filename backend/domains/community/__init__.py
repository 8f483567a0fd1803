"""Community domain: communities and the join workflow."""
