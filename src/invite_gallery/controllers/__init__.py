"""HTTP controllers — thin adapters over resources."""
