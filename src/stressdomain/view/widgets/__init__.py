from stressdomain.view.widgets.stress_domain import RenderedMarker, StressDomainWidget, format_point_label

__all__ = ["RenderedMarker", "StressDomainWidget", "format_point_label"]
