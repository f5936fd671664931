import logging

from fastapi import FastAPI, HTTPException

from taxcalc.config import get_settings
from taxcalc.errors import ConfigurationError, UnknownTaxParamsError
from taxcalc.factory import new_tax_calculator
from taxcalc.lifespan import build_application_lifespan
from taxcalc.models import CreditOut, PayableRequest, PayableResponse, RegionTax, to_finances
from taxcalc.params import supported_regions, supported_years
from taxcalc.tax.aggregator import Aggregator

logger = logging.getLogger("taxcalc")


async def _announce_defaults(_: FastAPI) -> None:
    settings = get_settings()
    logger.info(
        "Tax calculator API ready; default_tax_year=%s default_regions=%s supported_years=%s",
        settings.default_tax_year,
        ",".join(settings.default_regions),
        supported_years(),
    )


app = FastAPI(
    title="Tax Calculator",
    description="Payable income tax and leftover credits across federal and provincial jurisdictions.",
    lifespan=build_application_lifespan("api", startup_hook=_announce_defaults),
)


@app.get("/health")
def health():
    settings = getattr(app.state, "settings", get_settings())
    return {
        "status": "ok",
        "default_tax_year": settings.default_tax_year,
        "default_regions": settings.default_regions,
        "supported_years": supported_years(),
        "build": {"version": settings.build_version},
    }


@app.get("/tax/{tax_year}/regions")
def list_regions(tax_year: int):
    regions = supported_regions(tax_year)
    if not regions:
        raise HTTPException(status_code=404, detail=f"Unsupported tax year {tax_year}")
    return {"tax_year": tax_year, "regions": regions}


@app.post("/tax/payable", response_model=PayableResponse)
def tax_payable(req: PayableRequest) -> PayableResponse:
    settings = get_settings()
    year = req.tax_year if req.tax_year is not None else settings.default_tax_year
    regions = req.regions or list(settings.default_regions)

    try:
        members = [new_tax_calculator(year, region) for region in regions]
        calc = members[0] if len(members) == 1 else Aggregator(*members)
    except (UnknownTaxParamsError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ConfigurationError as exc:  # pragma: no cover - registered params are validated
        logger.error("Invalid tax configuration", extra={"year": year, "regions": regions, "error": str(exc)})
        raise HTTPException(status_code=500, detail="invalid tax configuration") from exc

    calc.set_finances(to_finances(req.finances), to_finances(req.spouse_finances))
    calc.set_dependents(*(d.to_person() for d in req.dependents))

    breakdown = []
    total = 0.0
    credits = []
    for member in members:
        member_tax, member_credits = member.tax_payable()
        breakdown.append(RegionTax(region=member.region.code, tax_payable=round(member_tax, 2)))
        total += member_tax
        credits.extend(member_credits)

    total = round(total, 2)
    logger.info("Computed tax payable: year=%s regions=%s total=%.2f", year, ",".join(regions), total)
    return PayableResponse(
        tax_year=year,
        regions=[member.region.code for member in members],
        tax_payable=total,
        is_refund=total < 0,
        breakdown=breakdown,
        credits=[CreditOut.from_credit(cr) for cr in credits],
    )
