#!/usr/bin/env python3
"""
Channel Plan Example

Builds a small 2m channel plan from frequency strings, checks channel
spacing with range arithmetic, classifies each channel against the SI and
ITU band tables and writes the plan out as YAML.
"""

import sys

# Add src to path for development
sys.path.insert(0, '../src')

from rf_module import ITU_BANDS, Allocation, KHz, Range, parse_hz
from rf_module.core.config import BandPlanConfig


CHANNELS = {
    "APRS": "144.39MHz",
    "Calling": "146.52MHz",
    "Simplex 1": "146.55MHz",
    "Simplex 2": "146.565MHz",
}


def main():
    """Main entry point."""
    print("=" * 60)
    print("Channel Plan Example")
    print("=" * 60)
    print()

    # 12.5 kHz wide channels around each center frequency
    channel_width = Range(-KHz * 6.25, KHz * 6.25)

    allocations = []
    for name, text in CHANNELS.items():
        center = parse_hz(text)
        channel = channel_width.add(center)
        allocations.append(Allocation(name=name, range=channel))
        print(f"{name:<10} {channel}  SI={center.si_band_name()} ITU={center.itu_band_name()}"
              f"  wavelength={center.wavelength():.3f} m")

    print()
    print("Adjacent channel overlap:")
    for lower, upper in zip(allocations, allocations[1:]):
        shared = lower.range.intersection(upper.range)
        status = "OVERLAP" if lower.range.overlaps(upper.range) else "clear"
        print(f"  {lower.name} / {upper.name}: {status} (shared {shared})")

    print()
    print(f"ITU bands touched: {', '.join(ITU_BANDS.overlapping(allocations[0].range).names())}")

    plan = BandPlanConfig(name="2m-simplex", allocations=allocations)
    if plan.save("channel_plan.yaml"):
        print("Saved to: channel_plan.yaml")

    return 0


if __name__ == "__main__":
    sys.exit(main())
