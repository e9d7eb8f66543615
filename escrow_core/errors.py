class CalendarError(ValueError):
    pass


class EmptyInputError(CalendarError):
    def __init__(self, message="No dates have been set yet."):
        super().__init__(message)


class EmptyMonthError(CalendarError):
    def __init__(self, message="Cannot lay out a month without events."):
        super().__init__(message)


class InvalidRangeError(CalendarError):
    def __init__(self, label, start, end):
        self.label = label
        self.start = start
        self.end = end
        super().__init__(f"{label or 'Range'} ends ({end.isoformat()}) before it starts ({start.isoformat()}).")


class MonthSpanError(CalendarError):
    def __init__(self, months):
        self.months = list(months)
        labels = ", ".join(f"{year}-{month:02d}" for year, month in self.months)
        super().__init__(f"Dates span more than two months ({labels}).")
