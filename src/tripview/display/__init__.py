"""Display formatting — fixed-locale dates, durations, numbers and lists."""
