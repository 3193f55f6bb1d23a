from exemplar.execution.runtime import rt


def emit(event: str, data: dict=None):
    assert isinstance(event, str) and event != '', 'Event name must be a non-empty string.'
    assert data is None or isinstance(data, dict), 'Event data must be a dict.'

    rt.emit(event, dict(data or {}))


exports = {
    'emit': emit,
}
