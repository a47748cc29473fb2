import sys

from config import parse_command_line, ProgramMode
from errors import HelpRequested, PlotError
from loaders.data_loader import load_data
from visualization.renderer import render
from visualization.save_outputs import save_rendered_image


def run(config):
    """
    Runs the complete pipeline for one configuration:
      1. Load data file (points + bounds)
      2. Build view transform & render primitives
      3. Save the image
    """

    print(f"\n=== Plotting {config.input_file} ({config.mode.value} mode) ===")

    # ------------------------------
    # STEP 1 — LOAD DATA
    # ------------------------------
    loaded = load_data(config.input_file)
    print(f"[INFO] Loaded {len(loaded.points)} points "
          f"({len(loaded.invalid_lines)} invalid lines skipped)")

    if config.mode == ProgramMode.LINES:
        n = len(loaded.points)
        print(f"[INFO] Drawing {n * (n - 1) // 2} lines and {n * (n - 1)} circles")

    # ------------------------------
    # STEP 2 — RENDER
    # ------------------------------
    image = render(loaded.points, config, bounds=loaded.bounds)

    # ------------------------------
    # STEP 3 — SAVE OUTPUT
    # ------------------------------
    save_rendered_image(config.output_file, image)

    print(f"[OK] Wrote {config.output_file}")


def main(argv=None) -> int:
    """
    Main entry point:
      - Parses command-line options
      - Loads, renders and saves
      - Returns 0 on success or help, 1 on any fatal error
    """
    try:
        config = parse_command_line(argv)
        run(config)
    except HelpRequested as e:
        print(e.help_text)
        return 0
    except PlotError as e:
        print(f"[ERROR] {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
