# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of broviewer.

# broviewer is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# broviewer is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with broviewer.  If not, see <https://www.gnu.org/licenses/>.

"""
Label catalogues for header sections, plots and map popups.

Lookups fall back from the requested locale to English, and from English to the
key itself, so a missing translation never breaks a header.
"""

DEFAULT_LOCALE = "en"

EN = {
    # header section titles
    "surveyInformation": "Survey information",
    "locationInformation": "Location",
    "equipmentSpecifications": "Equipment specifications",
    "processingInformation": "Processing",
    "zeroLoadMeasurements": "Zero load measurements",
    "measurementData": "Measurement data",
    "boreholeInformation": "Borehole information",
    "boringInformation": "Boring",
    "samplingInformation": "Sampling",
    "descriptionInformation": "Description",
    "surveyContext": "Survey context",
    "intervalData": "Intervals",
    "geologicalLayerData": "Geological layers",
    "layerData": "Layers",
    "laboratoryAnalysis": "Laboratory analysis",
    "registrationInformation": "Registration",
    # generic
    "yes": "Yes",
    "no": "No",
    "filename": "Filename",
    "broId": "BRO ID",
    "qualityRegime": "Quality regime",
    "reportDate": "Report date",
    "location": "Location",
    "surfaceLevel": "Surface level",
    "fileType": "Type",
    "coordinateSystem": "Coordinate system",
    "wgs84": "WGS84",
    "depthAxis": "Depth (m)",
    # location
    "deliveredLocation": "Delivered location",
    "standardizedLocation": "Standardized location",
    "verticalOffset": "Vertical offset",
    "verticalDatum": "Vertical datum",
    "referencePoint": "Reference point",
    # CPT survey
    "cptStandard": "CPT standard",
    "cptMethod": "CPT method",
    "qualityClass": "Quality class",
    "predrilledDepth": "Predrilled depth",
    "finalDepth": "Final depth",
    "waterLevel": "Groundwater level",
    "stopCriterion": "Stop criterion",
    "dissipationTest": "Dissipation test performed",
    # CPT equipment
    "description": "Description",
    "cptType": "Cone type",
    "coneSurfaceArea": "Cone surface area",
    "coneDiameter": "Cone diameter",
    "coneSurfaceQuotient": "Cone surface quotient",
    "coneToFrictionSleeveDistance": "Cone to friction sleeve distance",
    "frictionSleeveSurfaceArea": "Friction sleeve surface area",
    "frictionSleeveSurfaceQuotient": "Friction sleeve surface quotient",
    # CPT zero load
    "coneResistanceBefore": "Cone resistance before",
    "coneResistanceAfter": "Cone resistance after",
    "localFrictionBefore": "Local friction before",
    "localFrictionAfter": "Local friction after",
    "porePressureU1Before": "Pore pressure U1 before",
    "porePressureU1After": "Pore pressure U1 after",
    "porePressureU2Before": "Pore pressure U2 before",
    "porePressureU2After": "Pore pressure U2 after",
    "porePressureU3Before": "Pore pressure U3 before",
    "porePressureU3After": "Pore pressure U3 after",
    "inclinationEWBefore": "Inclination EW before",
    "inclinationEWAfter": "Inclination EW after",
    "inclinationNSBefore": "Inclination NS before",
    "inclinationNSAfter": "Inclination NS after",
    "inclinationResultantBefore": "Inclination resultant before",
    "inclinationResultantAfter": "Inclination resultant after",
    # CPT processing and measurements
    "finalProcessingDate": "Final processing date",
    "signalProcessingPerformed": "Signal processing performed",
    "interruptionProcessingPerformed": "Interruption processing performed",
    "expertCorrectionPerformed": "Expert correction performed",
    "numberOfMeasurements": "Number of measurements",
    "depthRange": "Depth range",
    "availableColumns": "Available columns",
    # borehole survey
    "descriptionProcedure": "Description procedure",
    "classificationStandard": "Classification standard",
    "finalBoreDepth": "Final bore depth",
    "finalSampleDepth": "Final sample depth",
    "rockReached": "Rock reached",
    "boreholeCompleted": "Borehole completed",
    "nitgCode": "NITG code",
    # boring
    "boringStartDate": "Boring start date",
    "boringEndDate": "Boring end date",
    "boringProcedure": "Boring procedure",
    "boringTechnique": "Boring technique",
    "trajectoryExcavated": "Trajectory excavated",
    "subsurfaceContaminated": "Subsurface contaminated",
    # sampling
    "samplerType": "Sampler type",
    "samplingProcedure": "Sampling procedure",
    "samplingMethod": "Sampling method",
    "samplingQuality": "Sampling quality",
    "orientatedSampled": "Orientated sampled",
    "continuouslySampled": "Continuously sampled",
    "sampleContainerDiameter": "Sample container diameter",
    "sampleContainerLength": "Sample container length",
    "pistonPresent": "Piston present",
    "coreCatcherPresent": "Core catcher present",
    "stockingUsed": "Stocking used",
    "lubricationFluidUsed": "Lubrication fluid used",
    "rightAngledCuttingShoe": "Right-angled cutting shoe",
    "cuttingShoeInsideDiameter": "Cutting shoe inside diameter",
    "cuttingShoeOutsideDiameter": "Cutting shoe outside diameter",
    "taperAngle": "Taper angle",
    # description
    "descriptionQuality": "Description quality",
    "describedSamplesQuality": "Described samples quality",
    "descriptionLocation": "Description location",
    "descriptionReportDate": "Description report date",
    "describedMaterial": "Described material",
    "sampleMoistness": "Sample moistness",
    "boreholeLogChecked": "Borehole log checked",
    # context
    "deliveryContext": "Delivery context",
    "surveyPurpose": "Survey purpose",
    "discipline": "Discipline",
    "surveyProcedure": "Survey procedure",
    "siteCharacteristicDetermined": "Site characteristic determined",
    # intervals
    "boredIntervals": "Bored intervals",
    "sampledIntervals": "Sampled intervals",
    "completedIntervals": "Completed intervals",
    "notDescribedIntervals": "Not described intervals",
    # registration
    "registrationStatus": "Registration status",
    "registrationTime": "Registration time",
    "registrationCompletionTime": "Registration completion time",
    "corrected": "Corrected",
    "underReview": "Under review",
    "reportStartDate": "Report start date",
    "reportEndDate": "Report end date",
    # layers
    "numberOfLayers": "Number of layers",
    "soilTypesNEN5104": "Soil types (NEN 5104)",
    "soilTypes": "Soil types",
    "anthropogenicLayers": "Anthropogenic layers",
    "rootedLayers": "Rooted layers",
    "layerColor": "Colour",
    "organicMatter": "Organic matter",
    "sandMedian": "Sand median",
    "dispersedInhomogeneity": "Dispersed inhomogeneity",
    "anthropogenic": "Anthropogenic",
    "rooted": "Rooted",
    # laboratory analysis
    "analysisReportDate": "Analysis report date",
    "analysisProcedure": "Analysis procedure",
    "investigatedIntervals": "Investigated intervals",
    "determinationTypes": "Determination types",
    "boreLog": "Bore log",
    "labTestSamples": "Lab test samples",
    "labTestType.basic": "Basic properties",
    "labTestType.particleSize": "Particle size",
    "labTestType.atterberg": "Atterberg limits",
    "labTestType.settlement": "Settlement",
    "labTestType.triaxial": "Triaxial",
    "labTestType.permeability": "Permeability",
    "labTestType.undrainedShearStrength": "Undrained shear strength",
    "labTestType.directShear": "Direct shear",
    # dissipation tests
    "dissipationTests": "Dissipation tests",
    "dissipationTestAtDepth": "Dissipation test at {depth} m",
    "elapsedTimeSeconds": "Elapsed time (s)",
    "porePressure": "Pore pressure",
    # laboratory plots
    "particleSizeDistribution": "Particle size distribution",
    "particleSizeMicrometre": "Particle size (μm)",
    "cumulativePassing": "Cumulative passing (%)",
    "clay": "Clay",
    "sand": "Sand",
    "gravel": "Gravel",
    "depthProfiles": "Depth profiles",
    "waterContent": "Water content",
    "bulkDensity": "Bulk density",
    "organicMatterContent": "Organic matter content",
    "carbonateContent": "Carbonate content",
    "particleDensity": "Particle density",
    "undrainedShearStrength": "Undrained shear strength",
}

NL = {
    "surveyInformation": "Onderzoeksgegevens",
    "locationInformation": "Locatie",
    "equipmentSpecifications": "Apparatuur",
    "processingInformation": "Bewerking",
    "zeroLoadMeasurements": "Nulpuntmetingen",
    "measurementData": "Meetgegevens",
    "boreholeInformation": "Boringgegevens",
    "boringInformation": "Boren",
    "samplingInformation": "Bemonstering",
    "descriptionInformation": "Beschrijving",
    "surveyContext": "Onderzoekscontext",
    "intervalData": "Trajecten",
    "geologicalLayerData": "Geologische lagen",
    "layerData": "Lagen",
    "laboratoryAnalysis": "Laboratoriumonderzoek",
    "registrationInformation": "Registratie",
    "yes": "Ja",
    "no": "Nee",
    "filename": "Bestandsnaam",
    "broId": "BRO-ID",
    "qualityRegime": "Kwaliteitsregime",
    "reportDate": "Rapportagedatum",
    "location": "Locatie",
    "surfaceLevel": "Maaiveldhoogte",
    "fileType": "Type",
    "coordinateSystem": "Coördinatenstelsel",
    "depthAxis": "Diepte (m)",
    "deliveredLocation": "Geleverde locatie",
    "standardizedLocation": "Gestandaardiseerde locatie",
    "verticalOffset": "Verticale positie",
    "verticalDatum": "Verticaal referentievlak",
    "referencePoint": "Referentiepunt",
    "cptStandard": "Sondeernorm",
    "cptMethod": "Sondeermethode",
    "qualityClass": "Kwaliteitsklasse",
    "predrilledDepth": "Voorgeboorde diepte",
    "finalDepth": "Einddiepte",
    "waterLevel": "Grondwaterstand",
    "stopCriterion": "Stopcriterium",
    "dissipationTest": "Dissipatietest uitgevoerd",
    "description": "Omschrijving",
    "cptType": "Conustype",
    "coneSurfaceArea": "Conusoppervlak",
    "coneDiameter": "Conusdiameter",
    "coneSurfaceQuotient": "Oppervlaktequotiënt conuspunt",
    "coneToFrictionSleeveDistance": "Afstand conus tot midden kleefmantel",
    "frictionSleeveSurfaceArea": "Oppervlakte kleefmantel",
    "frictionSleeveSurfaceQuotient": "Oppervlaktequotiënt kleefmantel",
    "coneResistanceBefore": "Conusweerstand vooraf",
    "coneResistanceAfter": "Conusweerstand achteraf",
    "localFrictionBefore": "Plaatselijke wrijving vooraf",
    "localFrictionAfter": "Plaatselijke wrijving achteraf",
    "porePressureU1Before": "Waterspanning U1 vooraf",
    "porePressureU1After": "Waterspanning U1 achteraf",
    "porePressureU2Before": "Waterspanning U2 vooraf",
    "porePressureU2After": "Waterspanning U2 achteraf",
    "porePressureU3Before": "Waterspanning U3 vooraf",
    "porePressureU3After": "Waterspanning U3 achteraf",
    "inclinationEWBefore": "Helling OW vooraf",
    "inclinationEWAfter": "Helling OW achteraf",
    "inclinationNSBefore": "Helling NZ vooraf",
    "inclinationNSAfter": "Helling NZ achteraf",
    "inclinationResultantBefore": "Hellingresultante vooraf",
    "inclinationResultantAfter": "Hellingresultante achteraf",
    "finalProcessingDate": "Datum laatste bewerking",
    "signalProcessingPerformed": "Signaalbewerking uitgevoerd",
    "interruptionProcessingPerformed": "Bewerking onderbrekingen uitgevoerd",
    "expertCorrectionPerformed": "Expertcorrectie uitgevoerd",
    "numberOfMeasurements": "Aantal metingen",
    "depthRange": "Dieptebereik",
    "availableColumns": "Beschikbare kolommen",
    "descriptionProcedure": "Beschrijfprocedure",
    "classificationStandard": "Classificatienorm",
    "finalBoreDepth": "Einddiepte boring",
    "finalSampleDepth": "Einddiepte monstername",
    "rockReached": "Gesteente bereikt",
    "boreholeCompleted": "Boring voltooid",
    "nitgCode": "NITG-code",
    "boringStartDate": "Begindatum boren",
    "boringEndDate": "Einddatum boren",
    "boringProcedure": "Boorprocedure",
    "boringTechnique": "Boortechniek",
    "trajectoryExcavated": "Traject ontgraven",
    "subsurfaceContaminated": "Ondergrond verontreinigd",
    "samplerType": "Monsternemer",
    "samplingProcedure": "Bemonsteringsprocedure",
    "samplingMethod": "Bemonsteringsmethode",
    "samplingQuality": "Bemonsteringskwaliteit",
    "orientatedSampled": "Georiënteerd bemonsterd",
    "continuouslySampled": "Doorlopend bemonsterd",
    "sampleContainerDiameter": "Diameter monsterbus",
    "sampleContainerLength": "Lengte monsterbus",
    "pistonPresent": "Zuiger aanwezig",
    "coreCatcherPresent": "Kernvanger aanwezig",
    "stockingUsed": "Kous gebruikt",
    "lubricationFluidUsed": "Smeermiddel gebruikt",
    "rightAngledCuttingShoe": "Haaks snijvlak",
    "cuttingShoeInsideDiameter": "Binnendiameter snijschoen",
    "cuttingShoeOutsideDiameter": "Buitendiameter snijschoen",
    "taperAngle": "Tophoek",
    "descriptionQuality": "Beschrijfkwaliteit",
    "describedSamplesQuality": "Kwaliteit beschreven monsters",
    "descriptionLocation": "Beschrijflocatie",
    "descriptionReportDate": "Rapportagedatum beschrijving",
    "describedMaterial": "Beschreven materiaal",
    "sampleMoistness": "Vochtigheid monster",
    "boreholeLogChecked": "Boorstaat gecontroleerd",
    "deliveryContext": "Kader aanlevering",
    "surveyPurpose": "Kader onderzoek",
    "discipline": "Discipline",
    "surveyProcedure": "Onderzoeksprocedure",
    "siteCharacteristicDetermined": "Terreinkenmerk bepaald",
    "boredIntervals": "Geboorde trajecten",
    "sampledIntervals": "Bemonsterde trajecten",
    "completedIntervals": "Afgewerkte trajecten",
    "notDescribedIntervals": "Niet beschreven trajecten",
    "registrationStatus": "Registratiestatus",
    "registrationTime": "Tijdstip registratie",
    "registrationCompletionTime": "Tijdstip voltooiing registratie",
    "corrected": "Gecorrigeerd",
    "underReview": "In onderzoek",
    "reportStartDate": "Begindatum rapportage",
    "reportEndDate": "Einddatum rapportage",
    "numberOfLayers": "Aantal lagen",
    "soilTypesNEN5104": "Grondsoorten (NEN 5104)",
    "soilTypes": "Grondsoorten",
    "anthropogenicLayers": "Antropogene lagen",
    "rootedLayers": "Gewortelde lagen",
    "layerColor": "Kleur",
    "organicMatter": "Organische stof",
    "sandMedian": "Zandmediaan",
    "dispersedInhomogeneity": "Verspreide inhomogeniteit",
    "anthropogenic": "Antropogeen",
    "rooted": "Geworteld",
    "analysisReportDate": "Rapportagedatum analyse",
    "analysisProcedure": "Analyseprocedure",
    "investigatedIntervals": "Onderzochte trajecten",
    "determinationTypes": "Bepalingen",
    "boreLog": "Boorstaat",
    "labTestSamples": "Laboratoriummonsters",
    "labTestType.basic": "Basiseigenschappen",
    "labTestType.particleSize": "Korrelgrootte",
    "labTestType.atterberg": "Atterberggrenzen",
    "labTestType.settlement": "Zetting",
    "labTestType.triaxial": "Triaxiaal",
    "labTestType.permeability": "Doorlatendheid",
    "labTestType.undrainedShearStrength": "Ongedraineerde schuifsterkte",
    "labTestType.directShear": "Directe schuif",
    "dissipationTests": "Dissipatietesten",
    "dissipationTestAtDepth": "Dissipatietest op {depth} m",
    "elapsedTimeSeconds": "Verstreken tijd (s)",
    "porePressure": "Waterspanning",
    "particleSizeDistribution": "Korrelgrootteverdeling",
    "particleSizeMicrometre": "Korrelgrootte (μm)",
    "cumulativePassing": "Cumulatief doorval (%)",
    "clay": "Klei",
    "sand": "Zand",
    "gravel": "Grind",
    "depthProfiles": "Diepteprofielen",
    "waterContent": "Watergehalte",
    "bulkDensity": "Volumieke massa",
    "organicMatterContent": "Organischestofgehalte",
    "carbonateContent": "Kalkgehalte",
    "particleDensity": "Korreldichtheid",
    "undrainedShearStrength": "Ongedraineerde schuifsterkte",
}

CATALOGS = {"en": EN, "nl": NL}


def get_translator(locale=DEFAULT_LOCALE):
    """Return t(key, **kwargs) for the given locale.

    Keyword arguments are substituted with str.format into the looked-up label.
    """
    catalog = CATALOGS.get(locale, EN)

    def t(key, **kwargs):
        label = catalog.get(key) or EN.get(key) or key
        return label.format(**kwargs) if kwargs else label

    return t
