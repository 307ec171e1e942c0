"""
I/O Writers

Writes computed geometry as TSV.
"""

from pathlib import Path
import logging

from ..layout.types import LayoutResult

logger = logging.getLogger(__name__)


class GeometryWriter:
    """Writes per-node geometry with a commented header describing the bar"""

    def write(self, result, output_file):
        """
        Write layout result to TSV

        Header lines start with '#' and hold mode, pitch, progress and fill rect;
        the table has one row per node.

        Args:
            result: LayoutResult from LayoutEngine.layout()
            output_file: Path to output TSV file
        """
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        fill = result.fill
        with open(output_file, 'w') as f:
            f.write(f"# mode: {result.mode.value}\n")
            f.write(f"# part: {result.part:.3f}\n")
            f.write(f"# usable_width: {result.usable_width:.3f}\n")
            f.write(f"# progress: {result.progress}\n")
            f.write(f"# fill: {fill.left:.3f}\t{fill.top:.3f}\t{fill.right:.3f}\t{fill.bottom:.3f}\n")
            result.to_frame().to_csv(f, sep='\t', index=False, float_format='%.3f')
        logger.info(f"Geometry for {result.n_nodes} nodes written to {output_file}")


def write_geometry(result: LayoutResult, output_file: str) -> None:
    """Convenience function to write geometry"""
    GeometryWriter().write(result, output_file)
