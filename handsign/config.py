"""
Configuration management for hand sign recognition.
"""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class EstimatorConfig:
    """Gesture scoring configuration."""
    tolerance_deg: float
    noise_floor: float
    curl_margin_deg: float


@dataclass
class SelectionConfig:
    """Displayed gesture selection configuration."""
    min_confidence: float


@dataclass
class LoopConfig:
    """Detection scheduling configuration."""
    interval_ms: int


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    window_name: str
    font_scale: float


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    estimator: EstimatorConfig
    selection: SelectionConfig
    loop: LoopConfig
    display: DisplayConfig
    logging: LoggingConfig


DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses the packaged config.default.yaml

    Returns:
        Configuration object with all settings
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    return _dict_to_config(data)


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )

    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )

    estimator_data = data['estimator']
    estimator = EstimatorConfig(
        tolerance_deg=float(estimator_data['tolerance_deg']),
        noise_floor=float(estimator_data['noise_floor']),
        curl_margin_deg=float(estimator_data['curl_margin_deg'])
    )

    selection = SelectionConfig(
        min_confidence=float(data['selection']['min_confidence'])
    )

    loop = LoopConfig(interval_ms=int(data['loop']['interval_ms']))

    display_data = data['display']
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        window_name=display_data['window_name'],
        font_scale=float(display_data['font_scale'])
    )

    # logging section is optional
    logging_data = data.get('logging') or {}
    logging_cfg = LoggingConfig(level=str(logging_data.get('level', 'INFO')).upper())

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        estimator=estimator,
        selection=selection,
        loop=loop,
        display=display,
        logging=logging_cfg
    )
