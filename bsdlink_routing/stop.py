class Stop:
    __slots__ = ('stop_id', 'name', 'lat', 'lon')

    def __init__(self, stop_id, name, lat, lon):
        self.stop_id = str(stop_id)
        self.name = name
        self.lat = float(lat)
        self.lon = float(lon)

    @property
    def coordinate(self):
        return (self.lat, self.lon)

    def __eq__(self, other):
        if not isinstance(other, Stop):
            return NotImplemented
        return self.stop_id == other.stop_id

    def __hash__(self):
        return hash(self.stop_id)

    def __repr__(self):
        return f"Stop({self.stop_id}, {self.name}, {self.lat}, {self.lon})"
