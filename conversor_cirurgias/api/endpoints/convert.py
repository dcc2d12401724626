"""
Endpoints de conversão XML -> Excel.
"""
import io
import os
import zipfile

from fastapi import APIRouter, File, UploadFile, HTTPException, Query
from fastapi.responses import StreamingResponse

from conversor_cirurgias.common.logging_config import get_logger
from conversor_cirurgias.common.settings import get_settings
from conversor_cirurgias.exporters.excel_exporter import XLSX_MEDIA_TYPE
from conversor_cirurgias.parsing.config.layout import load_layout
from conversor_cirurgias.parsing.exceptions import ConversionError, EmptyResultError
from conversor_cirurgias.parsing.pipeline import ConversionPipeline, ConversionResult

logger = get_logger(__name__)
router = APIRouter()

MONTHLY_BUNDLE_NAME = "cirurgias_mensal.zip"


def _build_pipeline() -> ConversionPipeline:
    return ConversionPipeline(load_layout(get_settings().layout_file))


async def _convert_upload(file: UploadFile, monthly: bool) -> ConversionResult:
    suffix = os.path.splitext(file.filename or "")[1].lower()
    if suffix != '.xml':
        raise HTTPException(status_code=400, detail="Somente arquivos XML são suportados.")

    raw = await file.read()
    try:
        return _build_pipeline().run(raw, filename=file.filename, monthly=monthly)
    except EmptyResultError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ConversionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(
            f"Internal error during conversion: {e}",
            exc_info=True,
            filename=file.filename,
            monthly=monthly,
            error_type=type(e).__name__,
        )
        raise HTTPException(status_code=500, detail=f"Erro interno: {str(e)}")


@router.post("/preview")
async def preview(file: UploadFile = File(...), monthly: bool = Query(False)):
    """Extrai as cirurgias e devolve os registros sem gerar download."""
    result = await _convert_upload(file, monthly)
    return {
        "filename": file.filename,
        "count": result.record_count,
        "artifact_count": result.artifact_count,
        "artifacts": [a.filename for a in result.artifacts],
        "months": result.month_counts(),
        "records": [r.to_row() for r in result.records],
        "message": result.summary_message(),
    }


@router.post("/")
async def convert(file: UploadFile = File(...), monthly: bool = Query(False)):
    """
    Converte o XML em planilha(s).
    Um único arquivo é devolvido como .xlsx; vários (variante mensal) em um .zip.
    """
    result = await _convert_upload(file, monthly)

    if result.artifact_count == 1:
        artifact = result.artifacts[0]
        buffer = io.BytesIO(artifact.content)
        media_type = XLSX_MEDIA_TYPE
        filename = artifact.filename
    else:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as bundle:
            for artifact in result.artifacts:
                bundle.writestr(artifact.filename, artifact.content)
        buffer.seek(0)
        media_type = 'application/zip'
        filename = MONTHLY_BUNDLE_NAME

    headers = {
        'Content-Disposition': f'attachment; filename="{filename}"',
        'X-Record-Count': str(result.record_count),
        'X-Artifact-Count': str(result.artifact_count),
    }
    logger.info("Download prepared.", download=filename, artifact_count=result.artifact_count)
    return StreamingResponse(buffer, media_type=media_type, headers=headers)
