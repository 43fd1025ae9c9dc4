"""lifegrid — calendar and lifespan arithmetic for life-in-weeks views."""

__version__ = "0.2.0"

from lifegrid.analytics.grids import CellState as CellState
from lifegrid.analytics.grids import events_by_day as events_by_day
from lifegrid.analytics.grids import life_months_grid as life_months_grid
from lifegrid.analytics.grids import life_weeks_grid as life_weeks_grid
from lifegrid.analytics.grids import year_grid as year_grid
from lifegrid.analytics.snapshot import Snapshot as Snapshot
from lifegrid.analytics.snapshot import build_snapshot as build_snapshot
from lifegrid.config.defaults import default_state as default_state
from lifegrid.config.schema import AppState as AppState
from lifegrid.config.schema import Event as Event
from lifegrid.config.schema import User as User
from lifegrid.core.calendar import day_of_year as day_of_year
from lifegrid.core.calendar import days_between as days_between
from lifegrid.core.calendar import days_in_year as days_in_year
from lifegrid.core.calendar import days_until as days_until
from lifegrid.core.calendar import is_leap_year as is_leap_year
from lifegrid.core.clock import reference_now as reference_now
from lifegrid.core.events import calculate_event_progress as calculate_event_progress
from lifegrid.core.events import calculate_event_status as calculate_event_status
from lifegrid.core.formatting import format_date as format_date
from lifegrid.core.formatting import format_date_range as format_date_range
from lifegrid.core.life import LifeProgress as LifeProgress
from lifegrid.core.life import calculate_life_progress as calculate_life_progress
from lifegrid.core.life import life_percentage as life_percentage
from lifegrid.core.life import life_percentage_months as life_percentage_months
from lifegrid.core.life import months_lived as months_lived
from lifegrid.core.life import months_remaining as months_remaining
from lifegrid.core.life import total_months_in_life as total_months_in_life
from lifegrid.core.life import total_weeks_in_life as total_weeks_in_life
from lifegrid.core.life import weeks_lived as weeks_lived
from lifegrid.core.life import weeks_remaining as weeks_remaining
from lifegrid.core.year import YearProgress as YearProgress
from lifegrid.core.year import calculate_year_progress as calculate_year_progress
from lifegrid.core.year import days_passed_in_year as days_passed_in_year
from lifegrid.core.year import days_remaining_in_year as days_remaining_in_year
from lifegrid.core.year import year_progress_percentage as year_progress_percentage
from lifegrid.store.app_store import AppStore as AppStore
