from pathlib import Path
import os
from dotenv import load_dotenv

load_dotenv()

# Raíz del paquete app/  ->  .../app
APP_DIR = Path(__file__).resolve().parents[1]
# Raíz del repo (padre de app/)  ->  ...
REPO_ROOT = APP_DIR.parent

# === Archivos públicos ===
# Puedes sobreescribir con la var de entorno PUBLIC_DIR
PUBLIC_DIR = Path(os.getenv("PUBLIC_DIR", REPO_ROOT / "public")).resolve()

# Audios de las actividades, servidos en /audio
AUDIO_DIR = PUBLIC_DIR / "audio"
AUDIO_DIR.mkdir(parents=True, exist_ok=True)
