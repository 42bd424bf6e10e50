# ==============================================================================
# REPOSITORIO BASE - Funcionalidad común para acceso a archivos de texto
# ==============================================================================

import os
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from store_checkout import console


class BaseRepository(ABC):
    """
    Clase base abstracta para los repositorios de archivo plano.
    Proporciona lectura/escritura de líneas de texto.

    Los errores de E/S no se propagan: se reportan por consola y el
    llamador recibe None (lectura) o False (escritura). El estado en
    memoria sigue siendo la fuente de verdad.
    """

    def __init__(self, file_path: str):
        """
        Inicializa el repositorio con la ruta al archivo.

        Args:
            file_path: Ruta al archivo de datos
        """
        self.file_path = file_path

    @abstractmethod
    def _empty_data(self) -> Any:
        """
        Retorna la estructura de datos vacía para este repositorio.
        Debe ser implementado por cada repositorio concreto.
        """
        pass

    def _read_lines(self) -> Optional[List[str]]:
        """
        Lee todas las líneas del archivo.

        Cada línea se decodifica por separado: una línea que no es UTF-8
        válido se reporta y se carga con caracteres de reemplazo, sin
        afectar al resto del archivo.

        Returns:
            Líneas sin salto de línea, o None si no se pudo leer
        """
        try:
            with open(self.file_path, 'rb') as f:
                raw_lines = f.read().splitlines()
        except OSError as e:
            console.warning(f"Unable to load {self.file_path}: {e}")
            return None

        lines = []
        for number, raw in enumerate(raw_lines, start=1):
            try:
                lines.append(raw.decode('utf-8'))
            except UnicodeDecodeError as e:
                console.warning(f"{self.file_path}:{number} is not valid UTF-8 ({e.reason})")
                lines.append(raw.decode('utf-8', errors='replace'))
        return lines

    def _write_lines(self, lines: List[str]) -> bool:
        """
        Reescribe el archivo completo.

        Returns:
            True si se escribió, False si hubo error de E/S
        """
        # Escribir a archivo temporal primero para atomicidad
        temp_path = self.file_path + '.tmp'
        try:
            with open(temp_path, 'w', encoding='utf-8') as f:
                for line in lines:
                    f.write(line)
                    f.write('\n')
            # Reemplazar archivo original (operación atómica en la mayoría de sistemas)
            os.replace(temp_path, self.file_path)
        except OSError as e:
            console.error(f"Unable to save {self.file_path}: {e}")
            # Limpiar archivo temporal si algo falla
            if os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                except OSError:
                    pass
            return False
        return True
