class SymbolIndex:
    """
    Id lookups over a decoded Profile.

    Location and function ids are not array positions, so both tables are
    hashed once up front. A dangling id or out of range string index resolves
    to None / "" instead of raising: attribution drops just that frame.
    """

    def __init__(self, profile):
        self.strings = profile.string_table
        self.locations = {}
        self.functions = {}

        # First occurrence wins for duplicated ids
        for location in profile.locations:
            self.locations.setdefault(location.id, location)
        for function in profile.functions:
            self.functions.setdefault(function.id, function)

    def resolve_string(self, index):
        if 0 <= index < len(self.strings):
            return self.strings[index]
        return ""

    def location(self, location_id):
        return self.locations.get(location_id)

    def function(self, function_id):
        return self.functions.get(function_id)

    def function_name_at(self, location_id):
        """
        Name of the innermost function at a location, or None when the
        location, its line info, or the function is missing.
        """
        location = self.locations.get(location_id)
        if location is None or not location.lines:
            return None
        function = self.functions.get(location.lines[0].function_id)
        if function is None:
            return None
        return self.resolve_string(function.name)
