"""Backend package hosting the calculation engine and its HTTP surface."""
