from .errors import (
    CeilingsError,
    IndexOutOfRangeError,
    InvalidDescriptionError,
    InvalidSurveyError,
    InvalidVertexError,
    MeasureFamilyError,
    NotEnoughPointsError,
    TooFewPointsError,
    TooManyPointsError,
    UnknownUnitError,
)
from .measures import (
    AngleMeasure,
    AreaMeasure,
    FigureMeasures,
    LengthMeasure,
    Measure,
    angle_measure_by_name,
    area_measure_by_name,
    convert,
    convert_from_base,
    convert_round,
    convert_to_base,
    length_measure_by_name,
    round_half_away,
)
from .figure import (
    AbsoluteVertex,
    AngleVertex,
    DirectionVertex,
    Point,
    Polygon,
    Segment,
    Triangle,
    new_point_by_angle,
    new_point_by_direction,
    normalize_angle,
    point_direction,
    vertex_from_mapping,
)
from .naming import LabelSequencer, side_labels, vertex_labels
from .layout import (
    Description,
    EdgeMark,
    LayoutOptions,
    RenderLayout,
    VertexMark,
    compute_layout,
    describe_polygon,
)
from .drawing import Drawing, DrawingCalculations

__all__ = [
    'AbsoluteVertex',
    'AngleMeasure',
    'AngleVertex',
    'AreaMeasure',
    'CeilingsError',
    'Description',
    'DirectionVertex',
    'Drawing',
    'DrawingCalculations',
    'EdgeMark',
    'FigureMeasures',
    'IndexOutOfRangeError',
    'InvalidDescriptionError',
    'InvalidSurveyError',
    'InvalidVertexError',
    'LabelSequencer',
    'LayoutOptions',
    'LengthMeasure',
    'Measure',
    'MeasureFamilyError',
    'NotEnoughPointsError',
    'Point',
    'Polygon',
    'RenderLayout',
    'Segment',
    'TooFewPointsError',
    'TooManyPointsError',
    'Triangle',
    'UnknownUnitError',
    'VertexMark',
    'angle_measure_by_name',
    'area_measure_by_name',
    'compute_layout',
    'convert',
    'convert_from_base',
    'convert_round',
    'convert_to_base',
    'describe_polygon',
    'length_measure_by_name',
    'new_point_by_angle',
    'new_point_by_direction',
    'normalize_angle',
    'point_direction',
    'round_half_away',
    'side_labels',
    'vertex_from_mapping',
    'vertex_labels',
]
