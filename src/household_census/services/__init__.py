from household_census.services.aggregation import (
    DemographicAggregates,
    compute_aggregates,
    flatten_population,
)
from household_census.services.census import CensusServiceImpl
from household_census.services.interfaces import CensusService
from household_census.services.roster import load_roster

__all__ = [
    "CensusService",
    "CensusServiceImpl",
    "DemographicAggregates",
    "compute_aggregates",
    "flatten_population",
    "load_roster",
]
