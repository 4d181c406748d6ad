"""Pipeline layer package for postal-code temperature resolution."""

from .interfaces import PipelineOutcome, TemperaturePipelinePort
from .temperature_resolution import (
	MESSAGE_COULD_NOT_GET_TEMPERATURE,
	MESSAGE_INVALID_ZIPCODE,
	MESSAGE_ZIPCODE_NOT_FOUND,
	TemperatureResolutionPipeline,
)

__all__ = [
	"MESSAGE_COULD_NOT_GET_TEMPERATURE",
	"MESSAGE_INVALID_ZIPCODE",
	"MESSAGE_ZIPCODE_NOT_FOUND",
	"PipelineOutcome",
	"TemperaturePipelinePort",
	"TemperatureResolutionPipeline",
]
