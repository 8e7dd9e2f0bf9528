# services/report_service.py
# report_service.py is a service module (Service Layer)
# with the class name ReportService, responsible for the final stock report.
class ReportService:

    def render(self, stock: dict) -> str:
        # One "SKU quantity" line per SKU, sorted by SKU.
        return "\n".join(f"{sku} {qty}" for sku, qty in sorted(stock.items()))
