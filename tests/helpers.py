def flight(source, destination, airline="IndiGo", **extra):
    """One CSV row for the write_csv fixture."""
    row = {"airline": airline, "source": source, "destination": destination}
    row.update(extra)
    return row
