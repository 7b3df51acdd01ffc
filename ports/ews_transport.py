from abc import ABC, abstractmethod

from domain.model.soap import Envelope, ResponseDocument

class EwsTransportPort(ABC):
    """
    Porta de transporte da operação FindFolder: entrega o envelope e devolve
    o documento de resposta já parseado.
    """

    @abstractmethod
    def send(self, envelope: Envelope) -> ResponseDocument:
        """
        Args:
            envelope: Requisição já construída.

        Returns:
            O ResponseDocument com o Body SOAP localizado.

        Raises:
            TransportError: falha de conexão ou status diferente de 200.
            ResponseParseError: XML malformado ou sem Body.
        """
        pass
