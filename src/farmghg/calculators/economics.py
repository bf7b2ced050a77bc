"""Default crop economics: revenue from yield and price, cost from per-hectare cost."""

from __future__ import annotations

from collections.abc import Sequence

from farmghg.farm.contract import Farm
from farmghg.results.models import EconomicsResult

KG_PER_TONNE = 1000.0


class DefaultEconomicsCalculator:
    def calculate_crop_results(self, farm: Farm) -> list[EconomicsResult]:
        results = []
        for component in farm.field_system_components:
            for item in component.crop_view_items:
                tonnes = item.yield_per_hectare * item.area / KG_PER_TONNE
                results.append(
                    EconomicsResult(
                        field_name=component.name,
                        crop_view_item=item,
                        revenue=tonnes * item.price_per_tonne,
                        cost=item.cost_per_hectare * item.area,
                    )
                )
        return results

    def get_total_profit(self, items: Sequence[EconomicsResult]) -> float:
        return sum(item.profit for item in items)


__all__ = ["DefaultEconomicsCalculator", "KG_PER_TONNE"]
