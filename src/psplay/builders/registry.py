"""Name -> builder lookup used by the CLI.

Operations are grouped by builder module. ``ref_domain`` names the
domain a ``--ref`` selector is bound to; it is None for builders that
take no leading reference.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from psplay.builders import artboard, brushes, content_layer, document, layer, tool, vector_mask
from psplay.domain.command import CommandEnvelope
from psplay.domain.errors import UnknownKeyword


@dataclass(frozen=True)
class Operation:
    """One registered builder function."""

    name: str
    func: Callable[..., CommandEnvelope]
    ref_domain: str | None = None

    @property
    def summary(self) -> str:
        doc = (self.func.__doc__ or "").strip()
        return doc.splitlines()[0] if doc else ""


def _group(ref_domain: str | None, **funcs: Callable[..., CommandEnvelope]) -> dict[str, Operation]:
    return {name: Operation(name, func, ref_domain) for name, func in funcs.items()}


def _merge(*groups: dict[str, Operation]) -> Mapping[str, Operation]:
    merged: dict[str, Operation] = {}
    for group in groups:
        merged.update(group)
    return MappingProxyType(dict(sorted(merged.items())))


OPERATIONS: Mapping[str, Mapping[str, Operation]] = MappingProxyType(
    {
        "layer": _merge(
            _group(
                layer.DOMAIN,
                reorder=layer.reorder,
                align=layer.align,
                distribute=layer.distribute,
                select=layer.select,
                hide=layer.hide,
                show=layer.show,
                duplicate=layer.duplicate,
                flip=layer.flip,
                set_size=layer.set_size,
                rotate=layer.rotate,
                set_opacity=layer.set_opacity,
                set_fill_opacity=layer.set_fill_opacity,
                set_blend_mode=layer.set_blend_mode,
                delete=layer.delete,
                rename=layer.rename,
                set_locking=layer.set_locking,
                translate=layer.translate,
            ),
            _group(None, deselect_all=layer.deselect_all, group_selected=layer.group_selected),
        ),
        "document": _merge(
            _group(
                document.DOMAIN,
                select=document.select,
                insert_guide=document.insert_guide,
                remove_guide=document.remove_guide,
                set_artboard_auto_attributes=document.set_artboard_auto_attributes,
                set_target_path_visible=document.set_target_path_visible,
            ),
            _group(
                None,
                open=document.open,
                close=document.close,
                save=document.save,
                create=document.create,
                create_with_preset=document.create_with_preset,
                resize=document.resize,
                get_guides_visibility=document.get_guides_visibility,
                get_smart_guides_visibility=document.get_smart_guides_visibility,
                set_guides_visibility=document.set_guides_visibility,
                set_smart_guides_visibility=document.set_smart_guides_visibility,
                get_extension_data=document.get_extension_data,
                set_extension_data=document.set_extension_data,
            ),
        ),
        "artboard": _merge(
            _group(layer.DOMAIN, transform=artboard.transform),
            _group(None, make=artboard.make),
        ),
        "content_layer": _merge(
            _group(
                content_layer.DOMAIN,
                set_stroke_alignment=content_layer.set_stroke_alignment,
                set_stroke_cap=content_layer.set_stroke_cap,
                set_stroke_corner=content_layer.set_stroke_corner,
                set_stroke_opacity=content_layer.set_stroke_opacity,
                set_shape_fill_type_solid_color=content_layer.set_shape_fill_type_solid_color,
                set_stroke_fill_type_solid_color=content_layer.set_stroke_fill_type_solid_color,
                set_shape_stroke_width=content_layer.set_shape_stroke_width,
                set_stroke_fill_type_pattern=content_layer.set_stroke_fill_type_pattern,
                set_shape_fill_type_pattern=content_layer.set_shape_fill_type_pattern,
                delete_shape_style=content_layer.delete_shape_style,
                move_shape=content_layer.move_shape,
                create_shape=content_layer.create_shape,
            ),
            _group(None, set_radius=content_layer.set_radius),
        ),
        "vector_mask": _merge(
            _group(
                None,
                make_bounds_work_path=vector_mask.make_bounds_work_path,
                make_vector_mask_from_work_path=vector_mask.make_vector_mask_from_work_path,
                delete_work_path=vector_mask.delete_work_path,
                delete_vector_mask=vector_mask.delete_vector_mask,
                select_vector_mask=vector_mask.select_vector_mask,
                activate_vector_mask_editing=vector_mask.activate_vector_mask_editing,
                enter_free_transform_path_mode=vector_mask.enter_free_transform_path_mode,
                create_reveal_all_mask=vector_mask.create_reveal_all_mask,
            ),
        ),
        "brushes": _merge(_group(None, set_brush_tip=brushes.set_brush_tip)),
        "tool": _merge(
            _group(
                None,
                set_tool=tool.set_tool,
                set_tool_options=tool.set_tool_options,
                set_direct_select_option_for_all_layers=tool.set_direct_select_option_for_all_layers,
                reset_shape_tool=tool.reset_shape_tool,
            )
        ),
    }
)


def get_operation(group: str, name: str) -> Operation:
    """Look up a registered builder.

    Raises:
        UnknownKeyword: If the group or operation is not registered.
    """
    operations = OPERATIONS.get(group)
    if operations is None:
        raise UnknownKeyword("builder group", group)
    operation = operations.get(name)
    if operation is None:
        raise UnknownKeyword(f"{group} operation", name)
    return operation
