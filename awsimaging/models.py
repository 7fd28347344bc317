"""
Immutable result types returned by the service adapters.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class BoundingBox:
    """Label instance geometry, as ratios of the image width and height."""

    width: float
    height: float
    left: float
    top: float

    @classmethod
    def from_response(cls, box: Dict[str, Any]) -> "BoundingBox":
        return cls(
            width=float(box.get('Width', 0.0)),
            height=float(box.get('Height', 0.0)),
            left=float(box.get('Left', 0.0)),
            top=float(box.get('Top', 0.0)),
        )

    def to_dict(self) -> Dict[str, float]:
        return {
            'width': self.width,
            'height': self.height,
            'left': self.left,
            'top': self.top,
        }


@dataclass(frozen=True)
class Label:
    """A single label detected in an image."""

    name: str
    confidence: float
    instances: Tuple[BoundingBox, ...] = ()
    parents: Tuple[str, ...] = ()

    @classmethod
    def from_response(cls, label: Dict[str, Any]) -> "Label":
        """
        Build a Label from one entry of a DetectLabels response.

        Args:
            label: Element of the response's 'Labels' list

        Returns:
            Label
        """
        instances = tuple(
            BoundingBox.from_response(instance['BoundingBox'])
            for instance in label.get('Instances', [])
            if instance.get('BoundingBox')
        )
        parents = tuple(parent['Name'] for parent in label.get('Parents', []))
        return cls(
            name=label['Name'],
            confidence=float(label['Confidence']),
            instances=instances,
            parents=parents,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'confidence': self.confidence,
            'instances': [box.to_dict() for box in self.instances],
            'parents': list(self.parents),
        }


@dataclass(frozen=True)
class LabelDetectionResult:
    """Labels detected in an image, in the order returned by Rekognition."""

    labels: Tuple[Label, ...] = field(default_factory=tuple)
    label_model_version: Optional[str] = None

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self):
        return iter(self.labels)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'labels': [label.to_dict() for label in self.labels],
            'label_model_version': self.label_model_version,
        }


@dataclass(frozen=True)
class UploadResult:
    """Location of an uploaded object. Reachability is not verified."""

    url: str
    bucket: str
    key: str
    region: str

    def to_dict(self) -> Dict[str, str]:
        return {'url': self.url}


@dataclass(frozen=True)
class ExtractedTextResult:
    """Text of every LINE block, one per output line."""

    text: str
    lines: Tuple[str, ...] = ()

    @classmethod
    def from_lines(cls, lines: List[str]) -> "ExtractedTextResult":
        return cls(text=''.join(f'{line}\n' for line in lines), lines=tuple(lines))

    def __str__(self) -> str:
        return self.text

    def to_dict(self) -> Dict[str, str]:
        return {'text': self.text}
