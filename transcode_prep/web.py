"""
HTTP preview service.

Exposes the splice and crop calculations over a small JSON API so that job
authoring tools can check a splice or a crop before submitting a job, and
lists the providers in a registry.
"""
import json
import logging
from dataclasses import asdict
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from flask.json.provider import DefaultJSONProvider

from transcode_prep.config import Settings
from transcode_prep.core.clippings import splice_to_clippings
from transcode_prep.core.crop import Crop
from transcode_prep.core.framerate import Framerate
from transcode_prep.core.geometry import Rectangle
from transcode_prep.core.scale import aspect, scale
from transcode_prep.core.splice import Splice
from transcode_prep.core.timecode import Range, parse
from transcode_prep.providers import ProviderNotFound, ProviderRegistry

logger = logging.getLogger(__name__)

# Disable werkzeug per-request logging
logging.getLogger('werkzeug').setLevel(logging.ERROR)


class RangeJSONProvider(DefaultJSONProvider):
    """
    JSON provider that writes Ranges and Splices in their fixed-point text
    form, so responses carry the same numbers as Splice.to_json().
    """

    def dumps(self, obj: Any, **kwargs: Any) -> str:
        if isinstance(obj, (Range, Splice)):
            return obj.to_json()
        if isinstance(obj, dict):
            items = sorted(obj.items()) if self.sort_keys else obj.items()
            return '{' + ','.join(f'{json.dumps(str(k))}:{self.dumps(v, **kwargs)}' for k, v in items) + '}'
        if isinstance(obj, (list, tuple)):
            return '[' + ','.join(self.dumps(v, **kwargs) for v in obj) + ']'
        return super().dumps(obj, **kwargs)


def rect_json(r: Rectangle) -> list:
    return list(r.as_tuple())


def source_from_json(value: Any) -> Rectangle:
    """
    Read a source frame given as 'WxH' or [x0, y0, x1, y1].

    Raises:
        ValueError: If value is neither
    """
    if isinstance(value, str):
        return Rectangle.parse(value)
    if isinstance(value, list) and len(value) == 4 and all(isinstance(v, int) for v in value):
        return Rectangle(*value)
    raise ValueError(f"Invalid source: {value!r}. Expected 'WIDTHxHEIGHT' or [x0, y0, x1, y1]")


def crop_from_json(value: Any) -> Crop:
    """
    Read crop insets given as {"left": .., "top": .., "right": .., "bottom": ..}.

    Missing edges default to 0.

    Raises:
        ValueError: If value is not an object of integer insets
    """
    if value is None:
        return Crop()
    if not isinstance(value, dict):
        raise ValueError(f"Invalid crop: {value!r}. Expected an object of insets")
    unknown = set(value) - {'left', 'top', 'right', 'bottom'}
    if unknown:
        raise ValueError(f"Invalid crop: unknown fields {sorted(unknown)}")
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in value.values()):
        raise ValueError(f"Invalid crop: {value!r}. Insets must be integers")
    return Crop(**value)


def create_app(registry: Optional[ProviderRegistry] = None, settings: Optional[Settings] = None) -> Flask:
    """Create the Flask app serving the preview API."""
    registry = registry if registry is not None else ProviderRegistry()
    settings = settings if settings is not None else Settings()
    app = Flask(__name__)
    app.json = RangeJSONProvider(app)

    def body() -> Dict[str, Any]:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")
        return data

    def fps_of(data: Dict[str, Any]) -> float:
        fps = data.get('fps', settings.fps)
        if isinstance(fps, str):
            return Framerate.parse(fps).fps()
        if isinstance(fps, bool) or not isinstance(fps, (int, float)) or not 0 <= fps < float('inf'):
            raise ValueError(f"Invalid fps: {fps!r}")
        return float(fps)

    @app.errorhandler(ValueError)
    def bad_request(e):
        return jsonify({'error': str(e)}), 400

    @app.errorhandler(ProviderNotFound)
    def not_found(e):
        return jsonify({'error': str(e)}), 404

    @app.route('/api/providers')
    def api_providers():
        return jsonify({'providers': registry.list(settings)})

    @app.route('/api/providers/<name>')
    def api_provider(name):
        return jsonify(asdict(registry.describe(name, settings)))

    @app.route('/api/timecode', methods=['POST'])
    def api_timecode():
        data = body()
        text = data.get('timecode')
        if not isinstance(text, str):
            raise ValueError("Missing 'timecode'")
        fps = fps_of(data)
        r = parse(text, fps)
        return jsonify({
            'range': r,
            'seconds': r.size().total_seconds(),
            'timecode': r.timecode(fps),
        })

    @app.route('/api/splice', methods=['POST'])
    def api_splice():
        data = body()
        fps = fps_of(data)
        raw = data.get('splice', '')
        if isinstance(raw, list):
            # re-encode so arrays get the same checks as text
            raw = app.json.dumps(raw)
        if not isinstance(raw, str):
            raise ValueError("Invalid 'splice': expected text or an array of ranges")
        s = Splice.from_text(raw)
        logger.debug("Previewing splice of %d ranges", len(s))
        return jsonify({
            'ranges': s,
            'size': s.size().total_seconds(),
            'union': s.union(),
            'sorted': s.is_sorted(),
            'clippings': [asdict(c) for c in splice_to_clippings(s, fps)],
        })

    @app.route('/api/scale', methods=['POST'])
    def api_scale():
        data = body()
        source = source_from_json(data.get('source'))
        crop = crop_from_json(data.get('crop'))
        cropped = crop.rect(source)
        scaled = scale(source, cropped)
        ar = aspect(source)
        return jsonify({
            'crop_rect': rect_json(cropped),
            'scaled': rect_json(scaled),
            'aspect': [ar.x, ar.y],
            'insets': Crop.from_rect(source, scaled).to_dict(),
        })

    return app


def run_server(app: Flask, host: str, port: int) -> None:
    """Run the Flask development server (blocking)."""
    logger.info("Serving on http://%s:%d", host, port)
    app.run(host=host, port=port, debug=False, use_reloader=False)
