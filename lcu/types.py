#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Type definitions for LCU API responses
Provides TypedDict definitions for the response shapes the party watcher reads
"""

from typing import List, TypedDict, Union


class ChampSelectAction(TypedDict, total=False):
    """One action inside a champ select action group"""
    id: int
    actorCellId: int
    championId: int
    type: str  # "pick", "ban", ...
    completed: bool
    isInProgress: bool


class TeamMember(TypedDict, total=False):
    """Entry of champ select myTeam / theirTeam"""
    cellId: int
    championId: int
    secondaryChampionId: int
    championPickIntent: int
    summonerId: int
    summonerName: str
    puuid: str


class ChampSelectSession(TypedDict, total=False):
    """Champion select session data"""
    actions: List[List[ChampSelectAction]]
    myTeam: List[TeamMember]
    theirTeam: List[TeamMember]
    localPlayerCellId: int
    playerName: str
    gameId: int
    isSpectating: bool


class PlayerChampionSelection(TypedDict, total=False):
    summonerId: int
    championIds: List[int]


class SelectedChampion(TypedDict, total=False):
    championId: int


class GameQueue(TypedDict, total=False):
    id: int
    gameMode: str
    isRanked: bool


class GameData(TypedDict, total=False):
    gameId: int
    queue: GameQueue
    playerChampionSelections: List[PlayerChampionSelection]
    selectedChampions: List[SelectedChampion]
    teamOne: List[dict]
    teamTwo: List[dict]


class GameflowSession(TypedDict, total=False):
    """Gameflow session, also carries the Swift Play assignment"""
    phase: str
    gameId: int
    gameData: GameData
    map: dict
    localPlayerSelection: dict


class PlayerSlot(TypedDict, total=False):
    championId: int
    skinId: int
    positionPreference: str


class LobbyMember(TypedDict, total=False):
    summonerId: int
    summonerName: str
    puuid: str
    playerSlots: List[PlayerSlot]


class LobbySession(TypedDict, total=False):
    """Lobby data (/lol-lobby/v2/lobby)"""
    members: List[LobbyMember]
    localMember: LobbyMember
    gameConfig: dict


class CurrentSummoner(TypedDict, total=False):
    summonerId: int
    displayName: str
    gameName: str
    tagLine: str
    puuid: str


class ChatFriend(TypedDict, total=False):
    summonerId: int
    pid: str
    name: str
    gameName: str


class ChatConversation(TypedDict, total=False):
    id: str
    pid: str
    type: str


class ChatMessage(TypedDict, total=False):
    """Message as returned by /lol-chat/v1/conversations/{id}/messages"""
    id: Union[str, int]
    body: str
    type: str
    timestamp: str
    fromSummonerId: Union[int, str]
    fromId: Union[int, str]
    senderId: Union[int, str]
    fromPid: str

