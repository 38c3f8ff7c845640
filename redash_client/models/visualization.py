"""Pydantic models for visualizations and their type-specific options.

The shape of ``options`` depends on the sibling ``type`` tag. Table and
chart options are decoded into typed models; any other tag keeps the payload
untouched in :class:`UnknownOptions` so newer visualization kinds still load.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import (
    ConfigDict,
    Field,
    ValidationError,
    FieldSerializationInfo,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_serializer,
)

from redash_client.models.common import RedashModel


class OptionsModel(RedashModel):
    """Base for option blocks. Keys without a mapped field are kept as extras."""

    model_config = ConfigDict(extra="allow")


# ------------------------------------------------------------------
# Table options
# ------------------------------------------------------------------


class TableColumn(OptionsModel):
    """Formatting rules for one table column."""

    name: str | None = None
    title: str | None = None
    visible: bool | None = None
    order: int | None = None
    type: str | None = None
    display_as: str | None = Field(None, alias="displayAs")
    align_content: str | None = Field(None, alias="alignContent")
    allow_search: bool | None = Field(None, alias="allowSearch")

    # Text
    allow_html: bool | None = Field(None, alias="allowHTML")
    highlight_links: bool | None = Field(None, alias="highlightLinks")

    # Number / date / boolean
    number_format: str | None = Field(None, alias="numberFormat")
    date_time_format: str | None = Field(None, alias="dateTimeFormat")
    boolean_values: list[str] | None = Field(None, alias="booleanValues")

    # Link
    link_url_template: str | None = Field(None, alias="linkUrlTemplate")
    link_title_template: str | None = Field(None, alias="linkTitleTemplate")
    link_text_template: str | None = Field(None, alias="linkTextTemplate")
    link_open_in_new_tab: bool | None = Field(None, alias="linkOpenInNewTab")

    # Image
    image_url_template: str | None = Field(None, alias="imageUrlTemplate")
    image_title_template: str | None = Field(None, alias="imageTitleTemplate")
    image_width: str | None = Field(None, alias="imageWidth")
    image_height: str | None = Field(None, alias="imageHeight")


class TableOptions(OptionsModel):
    """Options for ``table`` visualizations."""

    items_per_page: int | None = Field(None, alias="itemsPerPage")
    columns: list[TableColumn] | None = None


# ------------------------------------------------------------------
# Chart options
# ------------------------------------------------------------------


class ChartErrorY(OptionsModel):
    visible: bool | None = None
    type: str | None = None


class ChartLegend(OptionsModel):
    enabled: bool | None = None
    placement: str | None = None


class ChartSeries(OptionsModel):
    stacking: str | None = None
    error_y: ChartErrorY | None = None


class ChartAxisLabels(OptionsModel):
    enabled: bool | None = None


class ChartXAxis(OptionsModel):
    type: str | None = None
    labels: ChartAxisLabels | None = None


class ChartYAxis(OptionsModel):
    type: str | None = None
    opposite: bool | None = None


class ChartSeriesOption(OptionsModel):
    """Per-series overrides keyed by column name in ``seriesOptions``."""

    z_index: int | None = Field(None, alias="zIndex")
    index: int | None = None
    type: str | None = None
    y_axis: int | None = Field(None, alias="yAxis")


class ChartOptions(OptionsModel):
    """Options for ``chart`` visualizations."""

    global_series_type: str | None = Field(None, alias="globalSeriesType")
    column_mapping: dict[str, str] | None = Field(None, alias="columnMapping")
    error_y: ChartErrorY | None = None
    legend: ChartLegend | None = None
    series: ChartSeries | None = None
    missing_values_as_zero: bool | None = Field(None, alias="missingValuesAsZero")

    x_axis: ChartXAxis | None = Field(None, alias="xAxis")
    sort_x: bool | None = Field(None, alias="sortX")
    y_axis: list[ChartYAxis] | None = Field(None, alias="yAxis")
    series_options: dict[str, ChartSeriesOption] | None = Field(
        None, alias="seriesOptions"
    )

    # Data labels
    show_data_labels: bool | None = Field(None, alias="showDataLabels")
    number_format: str | None = Field(None, alias="numberFormat")
    percent_format: str | None = Field(None, alias="percentFormat")
    date_time_format: str | None = Field(None, alias="dateTimeFormat")
    text_format: str | None = Field(None, alias="textFormat")


class UnknownOptions(RedashModel):
    """Options of a visualization type this client does not model.

    ``raw`` is the payload exactly as received and is written back unchanged.
    """

    raw: Any = None

    @model_serializer
    def _serialize(self) -> Any:
        return self.raw


VisualizationOptions = TableOptions | ChartOptions | UnknownOptions

OPTIONS_BY_TYPE: dict[str, type[OptionsModel]] = {
    "table": TableOptions,
    "chart": ChartOptions,
}


def decode_options(kind: str | None, value: Any) -> VisualizationOptions | None:
    """Decode *value* into the options model selected by the *kind* tag.

    Tags are matched case-insensitively (the service emits ``TABLE`` and
    ``CHART``). Unrecognised tags never fail; the payload is wrapped as-is.
    """
    if value is None or isinstance(value, (TableOptions, ChartOptions, UnknownOptions)):
        return value

    model = OPTIONS_BY_TYPE.get(kind.lower()) if isinstance(kind, str) else None
    if model is None:
        return UnknownOptions(raw=value)

    try:
        return model.model_validate(value, strict=True)
    except ValidationError as exc:
        raise ValueError(f"invalid {kind} options: {exc}") from exc


class _OptionsByType(RedashModel):
    """Decodes ``options`` according to the ``type`` field declared before it."""

    @field_validator("options", mode="plain", check_fields=False)
    @classmethod
    def _decode_options(cls, value: Any, info: ValidationInfo) -> Any:
        return decode_options(info.data.get("type"), value)

    @field_serializer("options", check_fields=False)
    def _serialize_options(self, value: Any, info: FieldSerializationInfo) -> Any:
        # Serialized per concrete model so the union never reports a mismatch
        if value is None:
            return None
        if isinstance(value, UnknownOptions):
            return value.raw
        return value.model_dump(
            mode=info.mode,
            by_alias=bool(info.by_alias),
            exclude_unset=info.exclude_unset,
        )


# ------------------------------------------------------------------
# Visualization resources
# ------------------------------------------------------------------


class Visualization(_OptionsByType):
    """Visualization as embedded in a query's ``visualizations`` list."""

    id: int
    type: str
    name: str
    description: str | None = None
    options: VisualizationOptions | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VisualizationCreate(_OptionsByType):
    """Request body for ``POST /api/visualizations``."""

    query_id: int
    type: str
    name: str
    description: str | None = None
    options: VisualizationOptions | None = None


class VisualizationUpdate(_OptionsByType):
    """Request body for ``POST /api/visualizations/<id>``. Unset fields are left unchanged."""

    type: str | None = None
    name: str | None = None
    description: str | None = None
    options: VisualizationOptions | None = None
