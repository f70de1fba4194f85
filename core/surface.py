class DrawingSurface:
    """
    Minimal drawing capability consumed by the tree model.
    Concrete surfaces (e.g. the Qt scene view) override all three methods.
    """

    def draw_node(self, position, radius, label):
        """Render a labelled circle centred at position."""
        raise NotImplementedError

    def draw_edge(self, from_position, from_radius, to_position, to_radius):
        """
        Render a segment from the bottom of the 'from' circle
        (from.y + from_radius) to the top of the 'to' circle (to.y - to_radius).
        """
        raise NotImplementedError

    def clear(self):
        raise NotImplementedError

    @staticmethod
    def edge_endpoints(from_position, from_radius, to_position, to_radius):
        start = (from_position[0], from_position[1] + from_radius)
        end = (to_position[0], to_position[1] - to_radius)
        return start, end
