"""
Interfaces ports pour les clients des catalogues externes.

Chaque source externe dispose de ses propres DTOs (enregistrements types
propres a la source) et d'une interface abstraite. Les services ne manipulent
jamais les reponses brutes : les adaptateurs traduisent la forme native de
chaque API vers ces DTOs, puis les mappers des services traduisent les DTOs
vers les entites canoniques.

Sources :
- Catalogue principal (AnimeUnity) : recherche, fiche, episodes, URL d'embed
- Titres d'episodes (Jikan / MyAnimeList)
- Banniere et miniatures (AniList GraphQL)
- Affiches et couvertures (Kitsu JSON-API)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Literal, Optional, Union


# ============================================================================
# Catalogue principal (AnimeUnity)
# ============================================================================


@dataclass(frozen=True)
class AUShow:
    """
    Fiche d'une serie telle que decrite par le catalogue principal.

    Les champs sont conserves sous leur forme native : le score peut etre
    un nombre ou une chaine decimale, l'annee est une chaine, la saison et le
    statut sont des libelles italiens.

    Attributs :
        id : ID numerique du catalogue principal
        slug : Segment textuel de l'URL de la serie
        title : Titre anglais (ou titre original a defaut)
        type : Categorie native ("TV", "Movie", "OVA", ...)
        date : Annee de sortie (chaine "YYYY")
        plot : Synopsis
        season : Saison de sortie ("Inverno", "Primavera", "Estate", "Autunno")
        episodes_length : Duree d'un episode en minutes
        score : Note native (nombre ou chaine)
        dub : True si la version est doublee
        image_url : Affiche
        cover_url : Image de fond
        status : Statut natif ("In Corso", "Terminato", "In Uscita", "Droppato")
        anilist_id : ID AniList etranger
        mal_id : ID MyAnimeList etranger
        genres : Noms des genres
        episodes_count : Nombre total d'episodes
    """

    id: int
    slug: str
    title: str
    type: str = ""
    date: str = ""
    plot: Optional[str] = None
    season: Optional[str] = None
    episodes_length: Optional[int] = None
    score: Union[str, float, int, None] = None
    dub: bool = False
    image_url: Optional[str] = None
    cover_url: Optional[str] = None
    status: Optional[str] = None
    anilist_id: Optional[int] = None
    mal_id: Optional[int] = None
    genres: tuple[str, ...] = ()
    episodes_count: Optional[int] = None


@dataclass(frozen=True)
class AUEpisode:
    """
    Episode liste par le catalogue principal.

    Attributs :
        id : Media id (identifiant de l'asset lisible)
        number : Numero de l'episode sous forme de chaine ("12", "12.5")
        show_id : ID de la serie parente
        scws_id : ID de l'asset chez l'hebergeur video
    """

    id: str
    number: str
    show_id: Optional[int] = None
    scws_id: Optional[int] = None


ArchiveOrder = Literal["popularity", "views"]


class IPrimaryCatalogClient(ABC):
    """
    Interface du catalogue principal, seule source de verite.

    Toute erreur de ce client est fatale pour l'operation appelante.
    """

    @abstractmethod
    async def search(self, query: str) -> list[AUShow]:
        """Recherche des series par titre."""
        ...

    @abstractmethod
    async def get_show(self, show_id: int) -> AUShow:
        """
        Recupere la fiche complete d'une serie.

        Raises :
            UpstreamFetchError : Echec reseau ou reponse non-2xx
            MalformedResponseError : JSON embarque absent ou illisible
        """
        ...

    @abstractmethod
    async def get_episodes(
        self, show_id: int, start: int = 1, limit: int = 100
    ) -> list[AUEpisode]:
        """Recupere la plage d'episodes [start, start + limit - 1]."""
        ...

    @abstractmethod
    async def get_embed_url(self, media_id: int) -> str:
        """Recupere l'URL d'embed (texte brut) d'un media."""
        ...

    @abstractmethod
    async def get_archive(
        self,
        page: int = 1,
        order_by: Optional[ArchiveOrder] = None,
        show_type: Optional[str] = None,
    ) -> list[AUShow]:
        """Recupere une page du classement des series."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        ...


# ============================================================================
# Titres d'episodes (Jikan / MyAnimeList)
# ============================================================================


@dataclass(frozen=True)
class JikanShow:
    """
    Fiche MyAnimeList reduite aux champs utiles a l'enrichissement.

    Attributs :
        mal_id : ID MyAnimeList
        title : Titre
        large_image_url : Grande affiche (images.jpg.large_image_url)
        score : Note MAL (None si non notee)
        synopsis : Synopsis
    """

    mal_id: int
    title: str = ""
    large_image_url: Optional[str] = None
    score: Optional[float] = None
    synopsis: Optional[str] = None


@dataclass(frozen=True)
class JikanEpisode:
    """Episode MAL : mal_id est le numero absolu de l'episode chez Jikan."""

    mal_id: int
    title: Optional[str] = None


class IEpisodeTitleClient(ABC):
    """Interface de la source des titres d'episodes (enrichissement)."""

    @abstractmethod
    async def get_show(self, mal_id: int) -> JikanShow:
        """Recupere la fiche MAL d'une serie."""
        ...

    @abstractmethod
    async def get_episodes(
        self, mal_id: int, page: Optional[int] = None
    ) -> list[JikanEpisode]:
        """Recupere une page (100 episodes) de la liste des episodes."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        ...


# ============================================================================
# Banniere et miniatures (AniList)
# ============================================================================


@dataclass(frozen=True)
class AnilistShow:
    """
    Fiche AniList reduite.

    Attributs :
        title_romaji : Titre romaji
        title_english : Titre anglais
        cover_image : Couverture (extraLarge)
        banner_image : Banniere horizontale
    """

    title_romaji: str = ""
    title_english: Optional[str] = None
    cover_image: Optional[str] = None
    banner_image: Optional[str] = None


@dataclass(frozen=True)
class AnilistEpisode:
    """Episode de streaming AniList, numero extrait du titre libre."""

    number: int
    title: str
    thumbnail: Optional[str] = None


class IBannerClient(ABC):
    """Interface de la source des bannieres et miniatures (enrichissement)."""

    @abstractmethod
    async def get_show(self, anilist_id: int) -> AnilistShow:
        """Recupere la fiche AniList d'une serie."""
        ...

    @abstractmethod
    async def get_episodes(self, anilist_id: int) -> list[AnilistEpisode]:
        """
        Recupere tous les episodes de streaming.

        Raises :
            MalformedResponseError : Si un titre ne suit pas "Episode N - Titre"
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        ...


# ============================================================================
# Affiches et couvertures (Kitsu)
# ============================================================================


@dataclass(frozen=True)
class KitsuImage:
    """Declinaisons d'une image Kitsu."""

    original: Optional[str] = None
    tiny: Optional[str] = None
    small: Optional[str] = None
    medium: Optional[str] = None
    large: Optional[str] = None


@dataclass(frozen=True)
class KitsuShow:
    """Attributs d'image d'une fiche Kitsu."""

    poster_image: Optional[KitsuImage] = None
    cover_image: Optional[KitsuImage] = None


class ICoverImageClient(ABC):
    """Interface de la source des affiches et couvertures (enrichissement)."""

    @abstractmethod
    async def get_show(
        self,
        kitsu_id: Optional[int] = None,
        mal_id: Optional[int] = None,
    ) -> KitsuShow:
        """
        Recupere une fiche Kitsu par ID natif ou par ID MAL.

        Exactement un des deux identifiants doit etre fourni.

        Raises :
            MappingNotFoundError : Aucun mapping pour l'ID MAL
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        ...
